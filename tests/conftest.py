"""
Shared fixtures for the test suite.

Centralizes the httpx mocking boilerplate so client tests only describe the
response they want, not how the ``with httpx.Client(...)`` block is faked.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from infrastructure.metrics import REGISTRY

# ---------------------------------------------------------------------------
# Fake httpx responses
# ---------------------------------------------------------------------------


def _make_response(status_code: int, body: object = None, *, text: str | None = None) -> MagicMock:
    """Build a fake ``httpx.Response``-like object.

    ``body`` is what ``.json()`` returns; ``text`` defaults to its JSON dump.
    Pass ``text`` alone to simulate a body that does not decode.
    """
    resp = MagicMock()
    resp.status_code = status_code
    if text is None:
        resp.json.return_value = body
        resp.text = json.dumps(body)
    else:
        resp.json.side_effect = json.JSONDecodeError("Expecting value", text, 0)
        resp.text = text
    return resp


def make_http_client(response: MagicMock | None = None, *, error: Exception | None = None) -> MagicMock:
    """Build a fake ``httpx.Client`` usable as a context manager."""
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    if error is not None:
        client.request.side_effect = error
    else:
        client.request.return_value = response
    return client


@pytest.fixture()
def fake_http() -> Iterator[MagicMock]:
    """Patch ``httpx.Client`` and yield the fake instance.

    Tests set ``fake_http.request.return_value`` / ``side_effect``.
    The constructor mock is reachable as ``fake_http.factory``.
    """
    client = make_http_client(_make_response(200, {}))
    with patch("httpx.Client", return_value=client) as factory:
        client.factory = factory
        yield client


# ---------------------------------------------------------------------------
# Files and metrics
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    """A small fake WAV file on disk."""
    path = tmp_path / "kick_loop.wav"
    path.write_bytes(b"RIFF\x24\x00\x00\x00WAVEfmt ")
    return path


@pytest.fixture()
def make_response():
    """Factory fixture wrapping ``_make_response``."""
    return _make_response


@pytest.fixture()
def metric_value():
    """Read a sample from the client's registry (0.0 if absent)."""

    def _read(name: str, **labels: str) -> float:
        return REGISTRY.get_sample_value(name, labels) or 0.0

    return _read
