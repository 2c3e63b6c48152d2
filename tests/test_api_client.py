"""Tests for the file server API client.

The requests session is replaced with a MagicMock, so no server is needed.
"""

import os
import sys
from unittest.mock import MagicMock

import requests

# Add src to path so we can import the modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from services.api_client import FileServerClient


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _response(status=200, payload=None, content=b"", headers=None, text=""):
    response = MagicMock()
    response.status_code = status
    if payload is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload
    response.content = content
    response.headers = headers or {}
    response.text = text
    response.iter_content.return_value = [content]
    response.__enter__.return_value = response
    return response


def _client(escape_paths=True, response=None):
    session = MagicMock()
    session.request.return_value = response
    session.get.return_value = response
    client = FileServerClient(
        "http://server:3000/", timeout=5, escape_paths=escape_paths, session=session
    )
    return client, session


# ---------------------------------------------------------------------------
# URL building
# ---------------------------------------------------------------------------

def test_build_url_escapes_paths():
    client, _ = _client()
    url = client.build_url("/api/v1/mv", {"from": "./a&b.txt", "to": "./c #1.txt"})
    assert url == "http://server:3000/api/v1/mv?from=./a%26b.txt&to=./c%20%231.txt"


def test_build_url_without_escaping_is_literal():
    client, _ = _client(escape_paths=False)
    url = client.build_url("/api/v1/mv", {"from": "./a&b.txt", "to": "./c.txt"})
    assert url == "http://server:3000/api/v1/mv?from=./a&b.txt&to=./c.txt"


def test_download_url_peek():
    client, _ = _client()
    assert client.download_url("./x.png") == "http://server:3000/api/v1/download?path=./x.png"
    assert client.download_url("./x.png", peek=True).endswith("path=./x.png&peek=true")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

def test_list_directory_parses_entries():
    payload = {
        "success": True,
        "message": "",
        "files": [
            {"name": "a.txt", "is_dir": False, "mime": "text/plain", "size": 3},
            {"name": "sub", "is_dir": True},
        ],
    }
    client, session = _client(response=_response(payload=payload))

    result = client.list_directory(".")

    assert result.success
    assert [f.name for f in result.files] == ["a.txt", "sub"]
    assert result.files[1].is_dir
    assert result.files[1].mime is None
    session.request.assert_called_once_with(
        "GET", "http://server:3000/api/v1/ls?path=.", data=None, timeout=5
    )


def test_routes_and_methods():
    client, session = _client(response=_response(payload={"success": True}))

    client.upload("./a.txt", b"abc")
    client.move("./a", "./b")
    client.copy("./a", "./a (copy)")
    client.make_directory("./new")
    client.remove_file("./a")
    client.remove_directory("./d")

    calls = [(c.args[0], c.args[1].split("?")[0]) for c in session.request.call_args_list]
    assert calls == [
        ("PUT", "http://server:3000/api/v1/upload"),
        ("PUT", "http://server:3000/api/v1/mv"),
        ("PUT", "http://server:3000/api/v1/cp"),
        ("PUT", "http://server:3000/api/v1/mkdir"),
        ("DELETE", "http://server:3000/api/v1/rm"),
        ("DELETE", "http://server:3000/api/v1/rmdir"),
    ]
    assert session.request.call_args_list[0].kwargs["data"] == b"abc"


def test_server_rejection_keeps_message():
    client, _ = _client(response=_response(payload={"success": False, "message": "exists"}))

    result = client.make_directory("./a")

    assert not result.success
    assert not result.transport_error
    assert result.message == "exists"


def test_http_error_is_transport_error():
    client, _ = _client(response=_response(status=500, payload={"message": "boom"}))

    result = client.remove_file("./a")

    assert not result.success
    assert result.transport_error
    assert result.message == "boom"


def test_non_json_body_is_transport_error():
    client, _ = _client(response=_response(status=502))

    result = client.list_directory(".")

    assert result.transport_error
    assert result.message == "HTTP 502"


def test_connection_error_never_raises():
    client, session = _client()
    session.request.side_effect = requests.exceptions.ConnectionError()

    result = client.list_directory(".")

    assert not result.success
    assert result.transport_error
    assert result.message == "No connection to server"


# ---------------------------------------------------------------------------
# Downloads
# ---------------------------------------------------------------------------

def test_download_returns_content():
    response = _response(content=b"hi", headers={"Content-Type": "text/plain"})
    client, session = _client(response=response)

    result = client.download("./a.txt", peek=True)

    assert result.success
    assert result.content == b"hi"
    assert result.content_type == "text/plain"
    assert session.get.call_args.args[0].endswith("peek=true")


def test_download_to_file_writes_bytes(tmp_path):
    client, _ = _client(response=_response(content=b"payload"))
    dest = tmp_path / "out" / "a.bin"

    result = client.download_to_file("./a.bin", str(dest))

    assert result.success
    assert dest.read_bytes() == b"payload"


def test_download_not_found_uses_body_text(tmp_path):
    client, _ = _client(response=_response(status=404, text="not found"))

    result = client.download_to_file("./gone", str(tmp_path / "gone"))

    assert not result.success
    assert result.message == "not found"
    assert not (tmp_path / "gone").exists()


def test_download_closes_stream_on_error_status(tmp_path):
    response = _response(status=500, text="boom")
    client, _ = _client(response=response)

    result = client.download_to_file("./a.bin", str(tmp_path / "a.bin"))

    assert not result.success
    assert response.__exit__.called


def test_download_closes_stream_when_write_fails(tmp_path):
    response = _response(content=b"data")
    client, _ = _client(response=response)
    # A directory in place of the destination file makes open() fail
    dest = tmp_path / "taken"
    dest.mkdir()

    result = client.download_to_file("./a.bin", str(dest))

    assert not result.success
    assert result.message.startswith("Could not save file")
    assert response.__exit__.called
