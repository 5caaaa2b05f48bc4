"""Assemble the bus timetable for a place and render it as text."""
import logging
from typing import Any

from transit_scraper.assemble.models import BusSchedule, TimetableEntry
from transit_scraper.errors import StructureNotFoundError
from transit_scraper.extract.schedule import (
    TimetableRecord,
    extract_place_name,
    extract_routes_from_buses_section,
    extract_schedule_records,
)

logger = logging.getLogger(__name__)


def merge_route_lists(section_routes: list[str], records: list[TimetableRecord]) -> list[str]:
    """Routes from the "Buses" section first, then routes only seen in timetable rows."""
    routes = list(dict.fromkeys(section_routes))
    for r in records:
        if r.route not in routes:
            routes.append(r.route)
    return routes


def assemble_bus_schedule(root: Any) -> BusSchedule:
    """Raises StructureNotFoundError when the response has neither a "Buses" section nor any timetable row."""
    place = extract_place_name(root)
    records = extract_schedule_records(root)
    section_routes = extract_routes_from_buses_section(root)
    if not records and not section_routes:
        raise StructureNotFoundError("Could not locate any bus routes or timetable rows in the input.")
    routes = merge_route_lists(section_routes, records)
    logger.info(
        "telemetry bus_schedule_assembled place=%s routes=%s records=%s",
        place,
        len(routes),
        len(records),
    )
    return BusSchedule(
        place=place,
        buses=routes,
        timetable=[TimetableEntry(route=r.route, towords=r.stop, time=r.time) for r in records],
    )


def render_schedule_text(schedule: BusSchedule) -> str:
    lines = [schedule.place, "Buses"]
    lines.extend(schedule.buses)
    lines.extend(f"{e.mode} {e.route}\t{e.towords}\t{e.time}" for e in schedule.timetable)
    return "\n".join(lines) + "\n"
