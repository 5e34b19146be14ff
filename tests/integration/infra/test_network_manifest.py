from __future__ import annotations

"""
Integration tests for remote tree manifest retrieval.

Validates HTTP headers, timeout enforcement and handling of malformed
remote JSON resources.
"""

from unittest.mock import MagicMock, patch

import requests

from fsancestor.infra.network import DEFAULT_TIMEOUT, fetch_tree_manifest


def _response(payload):
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = payload
    resp.content = b"{}"
    return resp


def test_fetch_manifest_success() -> None:
    data = {"name": "root", "children": []}

    with patch("requests.get", return_value=_response(data)) as mock_get:
        result = fetch_tree_manifest("http://fake.url/tree.json")

    assert result == data
    _, kwargs = mock_get.call_args
    assert kwargs["timeout"] == DEFAULT_TIMEOUT
    assert "FsAncestor" in kwargs["headers"]["User-Agent"]


def test_fetch_manifest_timeout() -> None:
    with patch("requests.get", side_effect=requests.exceptions.Timeout):
        assert fetch_tree_manifest("http://slow.url") is None


def test_fetch_manifest_http_error() -> None:
    resp = _response({})
    resp.status_code = 404
    resp.raise_for_status.side_effect = requests.exceptions.HTTPError()

    with patch("requests.get", return_value=resp):
        assert fetch_tree_manifest("http://missing.url") is None


def test_fetch_manifest_non_object_payload() -> None:
    with patch("requests.get", return_value=_response(["not", "a", "tree"])):
        assert fetch_tree_manifest("http://list.url") is None


def test_fetch_manifest_invalid_json() -> None:
    resp = _response(None)
    resp.json.side_effect = ValueError("Expecting value")

    with patch("requests.get", return_value=resp):
        assert fetch_tree_manifest("http://garbage.url") is None
