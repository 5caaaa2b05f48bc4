"""
Extract the ordered stop sequence from a saved transit/lines RPC response.

Usage:
  extract-transit-stops transit_lines.json transit_stops.json [clean_response.json]
"""
import logging
import sys
from pathlib import Path

from settings import get_settings
from transit_scraper.assemble.stops import assemble_stop_sequence
from transit_scraper.cli._common import ArgumentParser, configure_logging, input_missing, write_json
from transit_scraper.errors import StructureNotFoundError
from transit_scraper.extract.matchers import Heuristics
from transit_scraper.rpc.normalize import load_response

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(
        prog="extract-transit-stops",
        description="Extract the ordered stop sequence from a transit lines response",
    )
    parser.add_argument("input", type=Path, help="Raw or clean transit lines JSON (XSSI prefix optional)")
    parser.add_argument("output", type=Path, help="Where to write the stop sequence JSON")
    parser.add_argument("clean_output", type=Path, nargs="?", help="Optional: pretty-printed copy of the parsed response")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    if input_missing(args.input):
        return 1

    data = load_response(args.input)
    try:
        result = assemble_stop_sequence(data, Heuristics.from_settings(settings))
    except StructureNotFoundError as e:
        logger.warning("telemetry stop_sequence_not_found input=%s", args.input)
        print(str(e), file=sys.stderr)
        return 1

    write_json(args.output, result.model_dump())
    print(f"Transit stop sequence written to: {args.output}")
    if args.clean_output:
        write_json(args.clean_output, data)
        print(f"Clean JSON written to: {args.clean_output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
