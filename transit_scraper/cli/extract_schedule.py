"""
Extract a human-readable bus timetable from a saved place preview response:

  Rupesh Hotel
  Buses
  355-A
  ...
  Bus 600-FC    Jigani APC Circle    8:00 AM

Usage:
  extract-bus-schedule response.json bus_schedule.txt [clean_response.json] [bus_schedule.json]
"""
import logging
import sys
from pathlib import Path

from settings import get_settings
from transit_scraper.assemble.schedule import assemble_bus_schedule, render_schedule_text
from transit_scraper.cli._common import ArgumentParser, configure_logging, input_missing, write_json
from transit_scraper.errors import StructureNotFoundError
from transit_scraper.rpc.normalize import load_response

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(
        prog="extract-bus-schedule",
        description="Extract a bus timetable from a place preview response",
    )
    parser.add_argument("input", type=Path, help="Raw or clean place preview JSON (XSSI prefix optional)")
    parser.add_argument("output", type=Path, help="Where to write the text timetable")
    parser.add_argument("clean_output", type=Path, nargs="?", help="Optional: pretty-printed copy of the parsed response")
    parser.add_argument("schedule_output", type=Path, nargs="?", help="Optional: structured schedule JSON")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    if input_missing(args.input):
        return 1

    data = load_response(args.input)
    try:
        schedule = assemble_bus_schedule(data)
    except StructureNotFoundError as e:
        logger.warning("telemetry bus_schedule_not_found input=%s", args.input)
        print(str(e), file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as f:
        f.write(render_schedule_text(schedule))
    print(f"Bus schedule written to: {args.output}")
    if args.clean_output:
        write_json(args.clean_output, data)
        print(f"Clean JSON written to: {args.clean_output}")
    if args.schedule_output:
        write_json(args.schedule_output, schedule.model_dump())
        print(f"Schedule JSON written to: {args.schedule_output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
