from transit_scraper.assemble.models import BusSchedule, StopRecord, StopSequenceResult, TimetableEntry
from transit_scraper.assemble.schedule import assemble_bus_schedule, merge_route_lists, render_schedule_text
from transit_scraper.assemble.stops import assemble_stop_sequence, dedupe_keep_endpoints, merge_endpoints

__all__ = [
    "BusSchedule",
    "StopRecord",
    "StopSequenceResult",
    "TimetableEntry",
    "assemble_bus_schedule",
    "assemble_stop_sequence",
    "dedupe_keep_endpoints",
    "merge_endpoints",
    "merge_route_lists",
    "render_schedule_text",
]
