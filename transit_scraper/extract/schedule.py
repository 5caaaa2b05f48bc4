"""
Bus timetable extraction from a place preview response.

A departure row looks roughly like:
  [..., "bus2.png", ..., ["BC-3A", 1, "#ffffff"], ...,
   ["Jigani APC Circle", null, null, [[[[1768724400, "Asia/Calcutta", "8:10 AM", ...]]]]], ...]
and the "Buses" section like:
  ["Buses", [...icon...], [[null, null, null, null, "0x..", [[5, ["355-A", 1, "#ffffff"]]]], ...], ...]
"""
import logging
from typing import Any, NamedTuple

from transit_scraper.extract.matchers import BADGE_SECTION_TAG, children, contains_string, find_route_badge

logger = logging.getLogger(__name__)

BUS_MARKERS = frozenset(["bus2.png", "Bus"])
BUSES_SECTION_TITLE = "Buses"
UNKNOWN_PLACE = "(unknown place)"


class TimetableRecord(NamedTuple):
    route: str
    stop: str
    time: str


def extract_place_name(root: Any) -> str:
    """
    First name from a place header like ["<id>", "<name>", null, [null, null, <lat>, <lng>], ...].
    """
    stack = [root]
    while stack:
        n = stack.pop()
        if (
            isinstance(n, list)
            and len(n) >= 4
            and isinstance(n[0], str)
            and isinstance(n[1], str)
            and n[2] is None
            and isinstance(n[3], list)
            and len(n[3]) >= 4
            and n[3][2] is not None
            and n[3][3] is not None
        ):
            if n[1]:
                return n[1]
            continue
        stack.extend(reversed(children(n)))
    return UNKNOWN_PLACE


def _time_from_block(tb: Any) -> str | None:
    # time_block ~ [[[[timestamp, tz, time_str, ...], ...]]]
    cur = tb
    for _ in range(3):
        if not isinstance(cur, list) or not cur:
            return None
        cur = cur[0]
    if isinstance(cur, list) and len(cur) >= 3 and isinstance(cur[2], str):
        return cur[2]
    return None


def find_stop_and_time(root: Any) -> tuple[str, str] | None:
    """First [stop_name, null, null, time_block] in pre-order with a resolvable time."""
    stack = [root]
    while stack:
        x = stack.pop()
        if isinstance(x, list) and len(x) >= 4 and isinstance(x[0], str) and x[1] is None and x[2] is None:
            time_str = _time_from_block(x[3])
            if time_str is not None:
                return x[0], time_str
        stack.extend(reversed(children(x)))
    return None


def match_schedule_record(node: Any) -> TimetableRecord | None:
    """A record if node is a list holding a bus marker, a route badge and a stop+time entry."""
    if not isinstance(node, list):
        return None
    if not contains_string(node, BUS_MARKERS):
        return None
    route = find_route_badge(node)
    stop_time = find_stop_and_time(node)
    if not route or stop_time is None or not stop_time[0] or not stop_time[1]:
        return None
    return TimetableRecord(route=route, stop=stop_time[0], time=stop_time[1])


def extract_schedule_records(root: Any) -> list[TimetableRecord]:
    """Every matching row in pre-order, deduplicated by exact (route, stop, time)."""
    records: list[TimetableRecord] = []
    seen: set[TimetableRecord] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        record = match_schedule_record(node)
        if record is not None and record not in seen:
            seen.add(record)
            records.append(record)
        stack.extend(reversed(children(node)))
    logger.debug("telemetry schedule_records_found count=%s", len(records))
    return records


def _section_route(sub: Any) -> str | None:
    if (
        isinstance(sub, list)
        and len(sub) >= 2
        and sub[0] == BADGE_SECTION_TAG
        and isinstance(sub[1], list)
        and len(sub[1]) >= 1
        and isinstance(sub[1][0], str)
    ):
        return sub[1][0]
    return None


def extract_routes_from_buses_section(root: Any) -> list[str]:
    """Route codes listed under every "Buses" section, first-seen order, no duplicates."""
    found: list[str] = []
    stack = [root]
    while stack:
        n = stack.pop()
        if isinstance(n, list) and len(n) >= 3 and n[0] == BUSES_SECTION_TITLE and isinstance(n[2], list):
            for item in n[2]:
                if not isinstance(item, list):
                    continue
                for sub in item:
                    # Badge either directly [5, [...]] or nested [[5, [...]]]
                    candidates = [sub] + (sub if isinstance(sub, list) else [])
                    for c in candidates:
                        route = _section_route(c)
                        if route is not None:
                            found.append(route)
        stack.extend(reversed(children(n)))
    return list(dict.fromkeys(found))
