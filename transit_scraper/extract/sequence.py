"""
Locate the rendered stop sequence and the origin/destination header in a
transit/lines response. Both finders keep the LAST match in pre-order: the
response embeds a master stop index before the rendered timetable, and the
later candidate is the one shown to the user.
"""
import logging
from typing import Any, NamedTuple

from transit_scraper.extract.matchers import (
    DEFAULT_HEURISTICS,
    OD_PAIR_MIN_LENGTH,
    Heuristics,
    extract_time,
    find_route_badge,
    looks_like_any_stop_entry,
    looks_like_timed_stop_entry,
)

logger = logging.getLogger(__name__)

TreePath = tuple[Any, ...]


class SequenceMatch(NamedTuple):
    path: TreePath
    entries: list[Any]
    route: str | None


class ODPairMatch(NamedTuple):
    path: TreePath
    origin: list[Any]
    destination: list[Any]


def get_by_path(root: Any, path: TreePath) -> Any:
    """Follow list indices / dict keys from root; None if any step is missing."""
    cur = root
    for p in path:
        if isinstance(cur, list) and isinstance(p, int) and 0 <= p < len(cur):
            cur = cur[p]
        elif isinstance(cur, dict) and p in cur:
            cur = cur[p]
        else:
            return None
    return cur


def _walk(node: Any, path: TreePath = ()):
    """Yield (path, node) for every list node in pre-order."""
    if isinstance(node, list):
        yield path, node
        for i, v in enumerate(node):
            yield from _walk(v, path + (i,))
    elif isinstance(node, dict):
        for k, v in node.items():
            yield from _walk(v, path + (k,))


def is_timed_stop_sequence(node: list[Any], heuristics: Heuristics = DEFAULT_HEURISTICS) -> bool:
    if len(node) < heuristics.sequence_min_length:
        return False
    head = node[: heuristics.sequence_head_entries]
    if len(head) < heuristics.sequence_head_entries:
        return False
    if not all(looks_like_timed_stop_entry(e, heuristics.timezone) for e in head):
        return False
    count = sum(1 for e in node if looks_like_timed_stop_entry(e, heuristics.timezone))
    return count >= heuristics.sequence_min_timed and count / len(node) > heuristics.sequence_min_density


def find_last_timed_stop_sequence(root: Any, heuristics: Heuristics = DEFAULT_HEURISTICS) -> SequenceMatch | None:
    """Last list in pre-order that looks like a timed stop sequence, with the badge found inside it (if any)."""
    last: tuple[TreePath, list[Any]] | None = None
    for path, node in _walk(root):
        if is_timed_stop_sequence(node, heuristics):
            last = (path, node)
    if last is None:
        return None
    path, node = last
    return SequenceMatch(path=path, entries=node, route=find_route_badge(node))


def resolve_route(root: Any, match: SequenceMatch) -> str | None:
    """Badge inside the sequence, else the first badge found walking ancestors back toward the root."""
    if match.route is not None:
        return match.route
    for i in range(len(match.path), -1, -1):
        subtree = get_by_path(root, match.path[:i])
        if subtree is None:
            continue
        route = find_route_badge(subtree)
        if route is not None:
            logger.debug("telemetry route_from_ancestor depth=%s route=%s", i, route)
            return route
    return None


def find_last_origin_destination_pair(root: Any, heuristics: Heuristics = DEFAULT_HEURISTICS) -> ODPairMatch | None:
    """
    Last header block that starts with two timed stops followed by an integer, e.g.
      [["Banashankari", ...], ["Jigani APC Circle", ...], 38, null, 0, ...]
    """
    last: ODPairMatch | None = None
    for path, node in _walk(root):
        if (
            len(node) >= OD_PAIR_MIN_LENGTH
            and looks_like_any_stop_entry(node[0])
            and looks_like_any_stop_entry(node[1])
            and isinstance(node[2], int)
            and extract_time(node[0], heuristics.timezone)
            and extract_time(node[1], heuristics.timezone)
        ):
            last = ODPairMatch(path=path, origin=node[0], destination=node[1])
    return last
