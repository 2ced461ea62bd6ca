from unittest.mock import MagicMock, patch

import pytest
import requests

from domain.models import FetchResult
from services.http_fetcher import build_default_headers, fetch, join_header_values


def _response(status, content):
    resp = MagicMock()
    resp.status_code = status
    resp.content = content
    return resp


def test_join_header_values():
    assert join_header_values(["application/json", "charset=utf-8"], ";") == "application/json;charset=utf-8"
    assert join_header_values([], ";") == ""
    assert join_header_values(["one"], ";") == "one"


def test_default_headers_send_json_content_type():
    headers = build_default_headers()
    assert headers["Content-Type"] == "application/json;charset=utf-8"
    assert headers["User-Agent"].startswith("street-geocoder/")


@patch("services.http_fetcher.requests.get")
def test_fetch_success_returns_body(mock_get):
    mock_get.return_value = _response(200, b'[{"type": "street"}]')

    result = fetch("http://example.test/search?street=x")

    assert result == FetchResult(ok=True, status=200, body=b'[{"type": "street"}]')
    args, kwargs = mock_get.call_args
    assert args == ("http://example.test/search?street=x",)
    assert kwargs["headers"]["Content-Type"] == "application/json;charset=utf-8"


@patch("services.http_fetcher.requests.get")
def test_fetch_error_status_keeps_error_body(mock_get):
    mock_get.return_value = _response(500, b"server exploded")

    result = fetch("http://example.test/")

    assert result.ok is False
    assert result.status == 500
    assert result.text() == "server exploded"


@patch("services.http_fetcher.requests.get")
def test_fetch_status_boundary(mock_get):
    mock_get.return_value = _response(399, b"")
    assert fetch("http://example.test/").ok is True
    mock_get.return_value = _response(400, b"")
    assert fetch("http://example.test/").ok is False


@patch("services.http_fetcher.requests.get")
def test_fetch_missing_body_is_empty(mock_get):
    mock_get.return_value = _response(404, None)

    result = fetch("http://example.test/")

    assert result.body == b""
    assert result.text() == ""


@patch("services.http_fetcher.requests.get")
def test_fetch_uses_given_headers(mock_get):
    mock_get.return_value = _response(200, b"[]")

    fetch("http://example.test/", {"X-Test": "1"})

    assert mock_get.call_args.kwargs["headers"] == {"X-Test": "1"}


@patch("services.http_fetcher.requests.get")
def test_fetch_propagates_transport_errors(mock_get):
    mock_get.side_effect = requests.ConnectionError("refused")

    with pytest.raises(requests.ConnectionError):
        fetch("http://example.test/")
    assert mock_get.call_count == 1


def test_fetch_result_text_replaces_bad_utf8():
    result = FetchResult(ok=True, status=200, body=b"ok \xff")
    assert result.text() == "ok \ufffd"
