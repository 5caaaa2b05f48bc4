"""Tests for XSSI prefix stripping and response parsing."""
import json

import pytest

from transit_scraper.errors import ParseError
from transit_scraper.rpc.normalize import XSSI_PREFIX, load_response, parse_response, strip_xssi_prefix

from builders import transit_lines_tree, with_xssi


def test_prefixed_document_parses_same_as_manually_stripped():
    tree = transit_lines_tree()
    raw = with_xssi(tree)
    manual = raw.split("\n", 1)[1]
    assert parse_response(raw) == json.loads(manual)
    assert parse_response(raw) == tree


def test_unprefixed_text_passes_through():
    text = '[1, "a", null]'
    assert strip_xssi_prefix(text) == text
    assert parse_response(text) == [1, "a", None]


def test_prefix_with_surrounding_whitespace_is_stripped():
    raw = f"  {XSSI_PREFIX}  \n[[\"x\"]]"
    assert parse_response(raw) == [["x"]]


def test_prefix_only_removed_from_first_line():
    raw = f'[1,\n"{XSSI_PREFIX}"]'
    assert parse_response(raw) == [1, XSSI_PREFIX]


def test_bytes_input():
    assert parse_response(b")]}'\n{\"k\": [1, 2]}") == {"k": [1, 2]}


def test_invalid_json_raises_parse_error():
    with pytest.raises(ParseError):
        parse_response(")]}'\n[1, 2")
    # Also a ValueError, for callers that catch broadly
    with pytest.raises(ValueError):
        parse_response("not json")


def test_invalid_utf8_raises_parse_error():
    with pytest.raises(ParseError):
        parse_response(b"\xff\xfe[1]")


def test_object_key_order_preserved():
    data = parse_response('{"z": 1, "a": 2, "m": 3}')
    assert list(data) == ["z", "a", "m"]


def test_load_response_reads_file(tmp_path):
    path = tmp_path / "response.json"
    path.write_text(with_xssi([["Bus", 1]]), encoding="utf-8")
    assert load_response(path) == [["Bus", 1]]
