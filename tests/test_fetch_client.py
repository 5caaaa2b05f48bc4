"""Unit tests for the Maps RPC fetcher: headers, file output and error handling."""
from unittest.mock import patch

import httpx
import pytest

from transit_scraper.cli import fetch
from transit_scraper.errors import FetchError
from transit_scraper.rpc.client import IPHONE_SAFARI_UA, PLACE_PREVIEW, TRANSIT_LINES, MapsRpcClient

BODY = b")]}'\n[[\"Bus\"]]"


def _mock_response(mock_client_cls, status_code=200, content=BODY):
    resp = mock_client_cls.return_value.__enter__.return_value.get.return_value
    resp.status_code = status_code
    resp.content = content
    resp.is_error = status_code >= 400
    return resp


def test_headers_carry_cookie_and_target_user_agent():
    client = MapsRpcClient(cookie="SID=abc")
    headers = client.headers_for(TRANSIT_LINES)
    assert headers["cookie"] == "SID=abc"
    assert headers["user-agent"] == IPHONE_SAFARI_UA
    assert headers["referer"] == "https://www.google.com/"
    assert "content-type" not in headers
    assert PLACE_PREVIEW.user_agent != TRANSIT_LINES.user_agent
    assert client.headers_for(PLACE_PREVIEW)["content-type"] == "application/json; charset=UTF-8"


def test_fetch_to_file_writes_raw_body(tmp_path):
    out = tmp_path / "transit_lines.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        _mock_response(mock_client_cls)
        client = MapsRpcClient(cookie="SID=abc", timeout_seconds=5.0)
        status = client.fetch_to_file(TRANSIT_LINES, "https://example.test/rpc", out)

        assert status == 200
        assert out.read_bytes() == BODY
        kwargs = mock_client_cls.call_args.kwargs
        assert kwargs["timeout"] == 5.0
        assert kwargs["headers"]["cookie"] == "SID=abc"
        mock_client_cls.return_value.__enter__.return_value.get.assert_called_once_with("https://example.test/rpc")


def test_fetch_to_file_keeps_error_body(tmp_path):
    out = tmp_path / "response.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        _mock_response(mock_client_cls, status_code=403, content=b"denied")
        status = MapsRpcClient(cookie="x").fetch_to_file(PLACE_PREVIEW, "https://example.test/place", out)
    assert status == 403
    assert out.read_bytes() == b"denied"


def test_transport_error_raises_fetch_error(tmp_path):
    out = tmp_path / "response.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        mock_client_cls.return_value.__enter__.return_value.get.side_effect = httpx.ConnectError("boom")
        with pytest.raises(FetchError):
            MapsRpcClient(cookie="x").fetch_to_file(PLACE_PREVIEW, "https://example.test/place", out)
    assert not out.exists()


# --- CLI ---


def test_fetch_cli_success(tmp_path, capsys):
    out = tmp_path / "lines.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        _mock_response(mock_client_cls)
        assert fetch.transit_lines_main(["--output", str(out)]) == 0
    assert out.read_bytes() == BODY
    assert f"Transit lines response saved to {out}" in capsys.readouterr().out


def test_fetch_cli_http_error_exit_1(tmp_path):
    out = tmp_path / "place.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        _mock_response(mock_client_cls, status_code=500, content=b"oops")
        assert fetch.place_preview_main(["--output", str(out)]) == 1
    assert out.read_bytes() == b"oops"


def test_fetch_cli_transport_error_exit_1(tmp_path, capsys):
    out = tmp_path / "place.json"
    with patch("transit_scraper.rpc.client.httpx.Client") as mock_client_cls:
        mock_client_cls.return_value.__enter__.return_value.get.side_effect = httpx.ReadTimeout("slow")
        assert fetch.place_preview_main(["--output", str(out)]) == 1
    assert not out.exists()
    assert "Error:" in capsys.readouterr().err
