from transit_scraper.extract.matchers import (
    DEFAULT_HEURISTICS,
    Heuristics,
    find_route_badge,
    looks_like_any_stop_entry,
    looks_like_timed_stop_entry,
    stop_key,
)
from transit_scraper.extract.schedule import (
    TimetableRecord,
    extract_place_name,
    extract_routes_from_buses_section,
    extract_schedule_records,
)
from transit_scraper.extract.sequence import (
    ODPairMatch,
    SequenceMatch,
    find_last_origin_destination_pair,
    find_last_timed_stop_sequence,
    resolve_route,
)

__all__ = [
    "DEFAULT_HEURISTICS",
    "Heuristics",
    "ODPairMatch",
    "SequenceMatch",
    "TimetableRecord",
    "extract_place_name",
    "extract_routes_from_buses_section",
    "extract_schedule_records",
    "find_last_origin_destination_pair",
    "find_last_timed_stop_sequence",
    "find_route_badge",
    "looks_like_any_stop_entry",
    "looks_like_timed_stop_entry",
    "resolve_route",
    "stop_key",
]
