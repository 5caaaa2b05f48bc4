"""
Shape matchers for nodes of a Maps RPC response tree.

The response is an undocumented positional array format. Everything here is
pattern-matching against observed shapes, e.g. a timed stop entry:

    ["Banashankari", ..., [1768735525, "Asia/Calcutta", "16:55", 19800, 1768735500],
     [null, null, 12.9255, 77.5468], "0x3bae...:0x6a0e...", ...]

and a route badge:

    [5, ["600-FC", 1, "#ffffff"]]   or   ["600-FC", 1, "#ffffff"]

Traversal is always pre-order: list index order, then dict key (insertion) order.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from settings import Settings

DEFAULT_TIMEZONE = "Asia/Calcutta"

# Empirically tuned against live responses; not documented upstream.
SEQUENCE_MIN_LENGTH = 5
SEQUENCE_HEAD_ENTRIES = 3
SEQUENCE_MIN_TIMED = 5
SEQUENCE_MIN_DENSITY = 0.6
OD_PAIR_MIN_LENGTH = 3
BADGE_MIN_LENGTH = 3
BADGE_SECTION_TAG = 5

NON_NAME_PREFIXES = ("0x", "http", "//")

StopKey = tuple[str, str | None, float | None, float | None]


class Heuristics(BaseModel):
    """Tunable thresholds for the structural matchers."""

    model_config = ConfigDict(frozen=True)

    timezone: str = DEFAULT_TIMEZONE
    sequence_min_length: int = SEQUENCE_MIN_LENGTH
    sequence_head_entries: int = SEQUENCE_HEAD_ENTRIES
    sequence_min_timed: int = SEQUENCE_MIN_TIMED
    sequence_min_density: float = SEQUENCE_MIN_DENSITY

    @classmethod
    def from_settings(cls, settings: Settings) -> Heuristics:
        return cls(
            timezone=settings.transit_timezone,
            sequence_min_length=settings.sequence_min_length,
            sequence_min_timed=settings.sequence_min_timed,
            sequence_min_density=settings.sequence_min_density,
        )


DEFAULT_HEURISTICS = Heuristics()


def children(node: Any) -> list[Any]:
    """Direct children in traversal order (list elements, or dict values in key order)."""
    if isinstance(node, list):
        return node
    if isinstance(node, dict):
        return list(node.values())
    return []


def _is_time_array(item: Any, timezone: str) -> bool:
    return (
        isinstance(item, list)
        and len(item) >= 3
        and isinstance(item[1], str)
        and item[1] == timezone
        and isinstance(item[2], str)
    )


def looks_like_any_stop_entry(node: Any) -> bool:
    """Non-empty list whose first element is a name (not a place id, URL or protocol-relative URL)."""
    if not isinstance(node, list) or not node:
        return False
    if not isinstance(node[0], str):
        return False
    return not node[0].startswith(NON_NAME_PREFIXES)


def looks_like_timed_stop_entry(node: Any, timezone: str = DEFAULT_TIMEZONE) -> bool:
    """
    Stop entries in the rendered sequence carry a time array
    [epoch, <timezone>, "HH:MM", offset, epoch]. Requiring it keeps the big
    untimed master stop list from matching.
    """
    if not looks_like_any_stop_entry(node):
        return False
    return any(_is_time_array(item, timezone) and ":" in item[2] for item in node)


def extract_time(entry: list[Any], timezone: str = DEFAULT_TIMEZONE) -> str | None:
    """First time string from a time array inside entry."""
    for item in entry:
        if _is_time_array(item, timezone):
            return item[2]
    return None


def extract_lat_lng(entry: list[Any]) -> tuple[float | None, float | None]:
    # Coordinates appear as [null, null, lat, lng]
    for item in entry:
        if isinstance(item, list) and len(item) >= 4 and item[0] is None and item[1] is None:
            lat, lng = item[2], item[3]
            if isinstance(lat, (int, float)) and isinstance(lng, (int, float)):
                return float(lat), float(lng)
    return None, None


def extract_place_id(entry: list[Any]) -> str | None:
    # Feature ids look like "0x3bae6b6cce624449:0x6a0e2b4dbae58776"
    for item in entry:
        if isinstance(item, str) and item.startswith("0x") and ":" in item:
            return item
    return None


def stop_name(entry: list[Any]) -> str:
    return entry[0] if entry and isinstance(entry[0], str) else ""


def stop_key(entry: list[Any]) -> StopKey:
    """Composite identity. Same-named stops with different coordinates or place ids stay distinct."""
    lat, lng = extract_lat_lng(entry)
    return (stop_name(entry), extract_place_id(entry), lat, lng)


def _is_colour(value: Any) -> bool:
    return isinstance(value, str) and value.startswith("#")


def match_route_badge(node: Any) -> str | None:
    """Route code if node itself is a badge, else None."""
    if not isinstance(node, list):
        return None
    # [5, ["ROUTE", 1, "#fff"]]
    if (
        len(node) >= 2
        and isinstance(node[0], int)
        and node[0] == BADGE_SECTION_TAG
        and isinstance(node[1], list)
        and len(node[1]) >= BADGE_MIN_LENGTH
        and isinstance(node[1][0], str)
        and _is_colour(node[1][2])
    ):
        return node[1][0]
    # ["ROUTE", 1, "#fff"]
    if (
        len(node) >= BADGE_MIN_LENGTH
        and isinstance(node[0], str)
        and isinstance(node[1], int)
        and _is_colour(node[2])
    ):
        return node[0]
    return None


def find_route_badge(root: Any) -> str | None:
    """First route code in pre-order within root, or None."""
    stack = [root]
    while stack:
        node = stack.pop()
        route = match_route_badge(node)
        if route is not None:
            return route
        stack.extend(reversed(children(node)))
    return None


def contains_string(root: Any, markers: frozenset[str]) -> bool:
    """True if any string equal to one of markers occurs anywhere under root."""
    stack = [root]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            if node in markers:
                return True
        else:
            stack.extend(children(node))
    return False
