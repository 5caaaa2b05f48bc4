"""
Google Maps internal RPC fetcher. Sends a browser-like GET with the operator's session
cookie and saves the raw response bytes. No retry and no session refresh: a failed
request is terminal for the invocation.
"""
import logging
from pathlib import Path
from typing import NamedTuple

import httpx

from transit_scraper.errors import FetchError

logger = logging.getLogger(__name__)

MAPS_REFERER = "https://www.google.com/"
MAPS_REQUEST_TIMEOUT_SECONDS = 30.0

DESKTOP_CHROME_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/143.0.0.0 Safari/537.36"
)
IPHONE_SAFARI_UA = (
    "Mozilla/5.0 (iPhone; CPU iPhone OS 18_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/26.0 Mobile/15E148 Safari/604.1"
)


class FetchTarget(NamedTuple):
    name: str
    label: str
    user_agent: str
    extra_headers: dict[str, str]


PLACE_PREVIEW = FetchTarget(
    name="place_preview",
    label="Response",
    user_agent=DESKTOP_CHROME_UA,
    extra_headers={"content-type": "application/json; charset=UTF-8"},
)
TRANSIT_LINES = FetchTarget(
    name="transit_lines",
    label="Transit lines response",
    user_agent=IPHONE_SAFARI_UA,
    extra_headers={},
)


class MapsRpcClient:
    """Fetches Maps RPC endpoints with the headers a browser session would send."""

    def __init__(
        self,
        cookie: str,
        accept_language: str = "en-GB,en-US;q=0.9,en;q=0.8",
        timeout_seconds: float = MAPS_REQUEST_TIMEOUT_SECONDS,
    ):
        self._cookie = cookie
        self._accept_language = accept_language
        self._timeout = timeout_seconds

    def headers_for(self, target: FetchTarget) -> dict[str, str]:
        headers = {
            "accept": "*/*",
            "accept-language": self._accept_language,
            "referer": MAPS_REFERER,
            "sec-fetch-site": "same-origin",
            "sec-fetch-mode": "cors",
            "user-agent": target.user_agent,
            "cookie": self._cookie,
        }
        headers.update(target.extra_headers)
        return headers

    def fetch(self, target: FetchTarget, url: str) -> httpx.Response:
        """GET url for target. Raises FetchError on transport failure; HTTP status is left to the caller."""
        try:
            with httpx.Client(timeout=self._timeout, headers=self.headers_for(target)) as client:
                resp = client.get(url)
        except httpx.HTTPError as e:
            logger.warning(
                "telemetry maps_fetch_error target=%s error=%s",
                target.name,
                str(e),
                extra={"target": target.name, "error": str(e)},
            )
            raise FetchError(f"Maps RPC request failed for {target.name}: {e}") from e
        logger.info(
            "telemetry maps_fetched target=%s status=%s bytes=%s",
            target.name,
            resp.status_code,
            len(resp.content),
            extra={"target": target.name, "status": resp.status_code},
        )
        return resp

    def fetch_to_file(self, target: FetchTarget, url: str, output_path: str | Path) -> int:
        """
        Fetch and write the raw (decompressed) body to output_path, whatever the status.
        Returns the HTTP status code.
        """
        resp = self.fetch(target, url)
        Path(output_path).write_bytes(resp.content)
        if resp.is_error:
            logger.warning(
                "telemetry maps_http_error target=%s status=%s output=%s",
                target.name,
                resp.status_code,
                output_path,
            )
        return resp.status_code
