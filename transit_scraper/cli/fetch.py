"""
Save a raw Maps RPC response to disk. URL, cookie and headers come from settings
(.env / environment); replace the placeholder cookie (MAPS_COOKIE) first.

Usage:
  fetch-place-preview [--output response.json]
  fetch-transit-lines [--output transit_lines.json]

Exit codes:
  0  2xx response, body saved
  1  HTTP 4xx/5xx (body is still saved, unlike `curl --fail`) or transport error / timeout (nothing saved)
  1  usage error

Note: plain `curl` exits 0 on an HTTP error status; this command does not.
"""
import sys
from pathlib import Path

from settings import PLACEHOLDER_COOKIE, Settings, get_settings
from transit_scraper.cli._common import ArgumentParser, configure_logging
from transit_scraper.errors import FetchError
from transit_scraper.rpc.client import PLACE_PREVIEW, TRANSIT_LINES, FetchTarget, MapsRpcClient


def _run(target: FetchTarget, url: str, default_output: str, settings: Settings, argv: list[str] | None) -> int:
    parser = ArgumentParser(prog=f"fetch-{target.name.replace('_', '-')}", description=f"Fetch {target.label.lower()}")
    parser.add_argument("--output", type=Path, default=Path(default_output), help="Where to save the raw response")
    args = parser.parse_args(argv)

    configure_logging(settings.log_level)
    if settings.maps_cookie == PLACEHOLDER_COOKIE:
        print("Warning: MAPS_COOKIE is still the placeholder; the response may be empty or blocked.", file=sys.stderr)

    client = MapsRpcClient(
        cookie=settings.maps_cookie,
        accept_language=settings.maps_accept_language,
        timeout_seconds=settings.fetch_timeout_seconds,
    )
    try:
        status = client.fetch_to_file(target, url, args.output)
    except FetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{target.label} saved to {args.output}")
    if status >= 400:
        print(f"Error: HTTP {status}", file=sys.stderr)
        return 1
    return 0


def place_preview_main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    return _run(PLACE_PREVIEW, settings.place_preview_url, settings.place_preview_output, settings, argv)


def transit_lines_main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    return _run(TRANSIT_LINES, settings.transit_lines_url, settings.transit_lines_output, settings, argv)


if __name__ == "__main__":
    sys.exit(transit_lines_main())
