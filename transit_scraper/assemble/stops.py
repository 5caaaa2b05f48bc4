"""
Build the ordered stop list for a transit line: origin + rendered timed sequence + destination.
"""
import logging
from typing import Any

from transit_scraper.assemble.models import StopRecord, StopSequenceResult
from transit_scraper.errors import StructureNotFoundError
from transit_scraper.extract.matchers import (
    DEFAULT_HEURISTICS,
    Heuristics,
    extract_lat_lng,
    extract_place_id,
    extract_time,
    looks_like_timed_stop_entry,
    stop_key,
    stop_name,
)
from transit_scraper.extract.sequence import (
    find_last_origin_destination_pair,
    find_last_timed_stop_sequence,
    resolve_route,
)

logger = logging.getLogger(__name__)


def merge_endpoints(
    origin: list[Any] | None,
    entries: list[list[Any]],
    destination: list[Any] | None,
) -> list[list[Any]]:
    """Prepend origin / append destination unless they are the same stop as the sequence's own ends."""
    merged: list[list[Any]] = []
    if isinstance(origin, list):
        if not entries or stop_key(origin) != stop_key(entries[0]):
            merged.append(origin)
    merged.extend(entries)
    if isinstance(destination, list):
        if not entries or stop_key(destination) != stop_key(entries[-1]):
            merged.append(destination)
    return merged


def dedupe_keep_endpoints(entries: list[list[Any]]) -> list[list[Any]]:
    """
    Drop repeated stops (by composite key) while preserving order. The first and
    last entries are explicit endpoints and are always kept. Unnamed entries are dropped.
    """
    out: list[list[Any]] = []
    seen: set = set()
    last = len(entries) - 1
    for i, e in enumerate(entries):
        if not stop_name(e):
            continue
        k = stop_key(e)
        if k in seen and i != 0 and i != last:
            continue
        seen.add(k)
        out.append(e)
    return out


def to_stop_record(index: int, entry: list[Any], timezone: str) -> StopRecord:
    lat, lng = extract_lat_lng(entry)
    return StopRecord(
        index=index,
        name=stop_name(entry),
        time=extract_time(entry, timezone),
        lat=lat,
        lng=lng,
        place_id=extract_place_id(entry),
    )


def assemble_stop_sequence(root: Any, heuristics: Heuristics = DEFAULT_HEURISTICS) -> StopSequenceResult:
    """Extract and assemble the stop sequence. Raises StructureNotFoundError if no timed sequence exists."""
    match = find_last_timed_stop_sequence(root, heuristics)
    if match is None:
        raise StructureNotFoundError("Could not locate a stop sequence in the input.")
    route = resolve_route(root, match)
    od = find_last_origin_destination_pair(root, heuristics)

    timed = [e for e in match.entries if looks_like_timed_stop_entry(e, heuristics.timezone)]
    merged = merge_endpoints(
        od.origin if od else None,
        timed,
        od.destination if od else None,
    )
    stops = [to_stop_record(i, e, heuristics.timezone) for i, e in enumerate(dedupe_keep_endpoints(merged))]

    logger.info(
        "telemetry stop_sequence_assembled route=%s count=%s od_pair=%s",
        route,
        len(stops),
        od is not None,
        extra={"route": route, "count": len(stops)},
    )
    return StopSequenceResult(
        route=route,
        stop_sequence=stops,
        count=len(stops),
        source_path=list(match.path) if match.path else None,
        origin_destination_path=list(od.path) if od and od.path else None,
    )
