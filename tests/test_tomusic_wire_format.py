"""Wire-format tests for MusicAiClient using ``httpx.MockTransport``.

Unlike test_tomusic_client.py, nothing in httpx is mocked here: requests are
fully built and encoded by httpx and handed to an in-process handler. This
pins down what actually goes over the wire (headers, JSON bytes, multipart
framing) and that real httpx exceptions map onto the client contract.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx
import pytest

from core.config import ClientConfig
from core.errors import TransportError
from ingestion.tomusic_client import MusicAiClient

API_KEY = "wire-format-key"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(handler) -> MusicAiClient:
    return MusicAiClient(API_KEY, transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# JSON requests
# ---------------------------------------------------------------------------


class TestJsonWireFormat:
    def test_generate_sends_json(self) -> None:
        handler = RecordingHandler(httpx.Response(200, json={"id": "abc"}))
        result = _client(handler).generate("techno", {"bpm": 130})

        request = handler.last
        assert result == {"id": "abc"}
        assert request.method == "POST"
        assert str(request.url) == "https://tomusic.ai/generate"
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"prompt": "techno", "bpm": 130}

    def test_get_has_no_body(self) -> None:
        handler = RecordingHandler(httpx.Response(200, json={"id": "t1"}))
        _client(handler).get_track_info("t1")

        request = handler.last
        assert request.method == "GET"
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_escaped_track_id_reaches_server_as_one_segment(self) -> None:
        handler = RecordingHandler(httpx.Response(200, json={}))
        _client(handler).get_track_info("a/b c")
        assert handler.last.url.raw_path == b"/tracks/a%2Fb%20c"

    @pytest.mark.parametrize(
        ("track_id", "raw_path"),
        [(".", b"/tracks/%2E"), ("..", b"/tracks/%2E%2E")],
    )
    def test_dot_track_ids_are_not_collapsed(self, track_id: str, raw_path: bytes) -> None:
        handler = RecordingHandler(httpx.Response(200, json={}))
        _client(handler).get_track_info(track_id)
        assert handler.last.url.raw_path == raw_path

    def test_dots_inside_track_id_are_kept(self) -> None:
        handler = RecordingHandler(httpx.Response(200, json={}))
        _client(handler).get_track_info("v1.2...final")
        assert handler.last.url.raw_path == b"/tracks/v1.2...final"

    def test_custom_base_url(self) -> None:
        handler = RecordingHandler(httpx.Response(200, json={}))
        client = MusicAiClient(
            API_KEY,
            config=ClientConfig(base_url="http://localhost:8000"),
            transport=httpx.MockTransport(handler),
        )
        client.generate("x")
        assert str(handler.last.url) == "http://localhost:8000/generate"


# ---------------------------------------------------------------------------
# Multipart uploads
# ---------------------------------------------------------------------------


class TestMultipartWireFormat:
    def test_upload_is_multipart(self, sample_file: Path) -> None:
        handler = RecordingHandler(httpx.Response(200, json={"status": "queued"}))
        result = _client(handler).upload_sample(sample_file)

        request = handler.last
        assert result == {"status": "queued"}
        assert str(request.url) == "https://tomusic.ai/upload"
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert b'name="file"; filename="kick_loop.wav"' in request.content
        assert sample_file.read_bytes() in request.content


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class TestResponses:
    def test_404_returns_none(self) -> None:
        handler = RecordingHandler(httpx.Response(404, text="no such track"))
        client = _client(handler)
        assert client.get_track_info("missing") is None
        assert client.last_failure.status_code == 404
        assert client.last_failure.body == "no such track"

    def test_invalid_json_returns_none(self) -> None:
        handler = RecordingHandler(httpx.Response(200, content=b"{not json"))
        assert _client(handler).generate("x") is None

    def test_empty_success_body_returns_none(self) -> None:
        handler = RecordingHandler(httpx.Response(204))
        assert _client(handler).generate("x") is None

    def test_corrupt_content_encoding_returns_none(self, metric_value, caplog) -> None:
        handler = RecordingHandler(
            httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"not gzip at all"),
            )
        )
        client = _client(handler)
        before = metric_value("tomusic_api_requests_total", operation="generate", outcome="malformed")

        with caplog.at_level(logging.WARNING, logger="ingestion.tomusic_client"):
            assert client.generate("x") is None

        assert client.last_failure is None
        assert "could not be decoded" in caplog.text
        after = metric_value("tomusic_api_requests_total", operation="generate", outcome="malformed")
        assert after == before + 1


# ---------------------------------------------------------------------------
# Transport failures
# ---------------------------------------------------------------------------


class TestTransportFailures:
    def test_connect_error_raises_transport_error(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(TransportError, match="Connection refused"):
            _client(refuse).generate("x")

    def test_timeout_raises_transport_error(self) -> None:
        def stall(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("Read timed out", request=request)

        with pytest.raises(TransportError) as excinfo:
            _client(stall).get_track_info("a")
        assert isinstance(excinfo.value.__cause__, httpx.TimeoutException)
