"""
Response normalization: strip the anti-XSSI prefix line and parse the JSON body.
"""
import json
import logging
from pathlib import Path
from typing import Any

from transit_scraper.errors import ParseError

logger = logging.getLogger(__name__)

# Google prepends this line so the payload cannot be executed via a <script> tag.
XSSI_PREFIX = ")]}'"


def strip_xssi_prefix(text: str) -> str:
    """Drop the first line if it is the XSSI sentinel; otherwise return text unchanged."""
    lines = text.splitlines()
    if lines and lines[0].strip() == XSSI_PREFIX:
        return "\n".join(lines[1:])
    return text


def parse_response(raw: bytes | str) -> Any:
    """
    Parse a raw Maps RPC response (with or without XSSI prefix) into a JSON tree.
    Objects keep key insertion order, so traversal over them is deterministic.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Response is not valid UTF-8: {e}") from e
    body = strip_xssi_prefix(raw)
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        raise ParseError(f"Response is not valid JSON after prefix strip: {e}") from e
    logger.debug("telemetry response_parsed chars=%s root_type=%s", len(body), type(data).__name__)
    return data


def load_response(path: str | Path) -> Any:
    return parse_response(Path(path).read_bytes())
