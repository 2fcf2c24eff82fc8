"""
ToMusic AI API client.

Turns each logical operation into one authenticated HTTP call and collapses
the outcome into a single contract:

    2xx + JSON object body   → dict
    non-2xx                  → None   (status/body logged, kept in last_failure)
    2xx + undecodable body   → None   (bad JSON or bad Content-Encoding; logged, never raised)
    no HTTP status at all    → TransportError raised

Lives in ingestion/ because it performs network and file I/O (core/ must
remain pure). Each call opens and closes its own ``httpx.Client``; there is
no retry, pooling or streaming.

Usage:
    from ingestion.tomusic_client import MusicAiClient
    client = MusicAiClient(api_key)
    track = client.generate("warm lo-fi piano", {"duration": 30})
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import quote

import httpx
from dotenv import load_dotenv

from core.api.types import ApiResult, HttpFailure, JsonBody, RequestSpec
from core.config import DEFAULT_CONFIG, ClientConfig
from core.errors import TransportError
from infrastructure.metrics import LatencyTimer, record_api_request
from ingestion.sample_loader import load_sample

logger = logging.getLogger(__name__)

API_KEY_ENV = "TOMUSIC_API_KEY"

PROMPT_KEY = "prompt"
"""Payload key reserved for the text prompt of ``generate``."""

_LOG_BODY_LIMIT = 500


def _truncate(text: str, limit: int = _LOG_BODY_LIMIT) -> str:
    """Shorten a response body for a log line."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}… ({len(text)} chars)"


def _path_segment(value: str) -> str:
    """Percent-encode ``value`` as exactly one URL path segment.

    ``quote`` leaves ``.`` alone, and httpx collapses ``.`` and ``..``
    segments, so those two are spelled out as ``%2E``.
    """
    if value in (".", ".."):
        return "%2E" * len(value)
    return quote(value, safe="")


class MusicAiClient:
    """
    Client for the ToMusic AI platform.

    The bearer token is fixed at construction and sent on every request; it
    is never logged and never appears in ``repr()`` or in returned results.

    Args:
        api_key: Bearer token for the ToMusic API.
        config: Base URL and timeout. Defaults to the public host.
        transport: Optional httpx transport, forwarded to ``httpx.Client``.

    Raises:
        ValueError: If api_key is empty.
    """

    def __init__(
        self,
        api_key: str,
        *,
        config: ClientConfig = DEFAULT_CONFIG,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        self._auth_header = {"Authorization": f"Bearer {api_key}"}
        self._config = config
        self._transport = transport
        self.last_failure: HttpFailure | None = None

    @classmethod
    def from_env(
        cls,
        *,
        config: ClientConfig = DEFAULT_CONFIG,
        transport: httpx.BaseTransport | None = None,
    ) -> MusicAiClient:
        """Build a client from ``TOMUSIC_API_KEY`` (``.env`` files included).

        Raises:
            ValueError: If the variable is unset or empty.
        """
        load_dotenv()
        api_key = os.environ.get(API_KEY_ENV, "")
        if not api_key:
            raise ValueError(f"{API_KEY_ENV} must be set in the environment or passed explicitly")
        return cls(api_key, config=config, transport=transport)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._config.base_url!r})"

    @property
    def config(self) -> ClientConfig:
        """Connection settings of this client."""
        return self._config

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def generate(self, prompt: str, options: Mapping[str, Any] | None = None) -> ApiResult:
        """
        Generate music from a text prompt.

        Args:
            prompt: Text describing the desired music.
            options: Extra generation parameters merged into the payload.
                A ``"prompt"`` entry is ignored; the argument always wins.
                The mapping is not modified.

        Returns:
            Decoded JSON object on success, None on failure.

        Raises:
            TransportError: If the server could not be reached.
        """
        extra = dict(options or {})
        if PROMPT_KEY in extra:
            logger.warning("Ignoring %r in generate options; the prompt argument is used", PROMPT_KEY)
            del extra[PROMPT_KEY]
        payload = {PROMPT_KEY: prompt, **extra}

        spec = RequestSpec(operation="generate", method="POST", path="/generate", body=JsonBody(payload))
        return self._send(spec)

    def get_track_info(self, track_id: str) -> ApiResult:
        """
        Retrieve information about a track.

        Args:
            track_id: Track identifier, escaped as a single path segment.

        Returns:
            Decoded JSON object on success, None on failure.

        Raises:
            TransportError: If the server could not be reached.
        """
        path = f"/tracks/{_path_segment(track_id)}"
        return self._send(RequestSpec(operation="track_info", method="GET", path=path))

    def upload_sample(self, file_path: str | Path) -> ApiResult:
        """
        Upload a local sample for analysis.

        The file is read before any network activity, so a bad path fails
        without contacting the server.

        Args:
            file_path: Path to the sample file.

        Returns:
            Decoded JSON object on success, None on failure.

        Raises:
            SampleFileNotFoundError: Path is missing or unreadable.
            TransportError: If the server could not be reached.
        """
        upload = load_sample(file_path)
        return self._send(RequestSpec(operation="upload", method="POST", path="/upload", body=upload))

    def premium_url(self) -> str:
        """URL of the platform's premium page."""
        return self._config.url_for("/premium")

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _send(self, spec: RequestSpec) -> ApiResult:
        """Perform one HTTP exchange for ``spec`` and interpret the response."""
        self.last_failure = None
        url = self._config.url_for(spec.path)
        request_kwargs = spec.encode()
        # Authorization goes last so a body encoder can never replace it
        headers = {**request_kwargs.pop("headers", {}), **self._auth_header}

        timer = LatencyTimer()
        try:
            with timer, httpx.Client(
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.request(spec.method, url, headers=headers, **request_kwargs)
        except httpx.TransportError as exc:
            record_api_request(
                operation=spec.operation,
                outcome="transport_error",
                latency_seconds=timer.elapsed,
            )
            logger.error("%s %s failed before a response: %s", spec.method, url, exc)
            raise TransportError(spec.operation, url, str(exc) or type(exc).__name__) from exc
        except httpx.DecodingError as exc:
            # Status arrived but Content-Encoding did not match the body
            record_api_request(operation=spec.operation, outcome="malformed", latency_seconds=timer.elapsed)
            logger.warning("API response body could not be decoded: operation=%s error=%s", spec.operation, exc)
            return None

        return self._interpret(spec, response, timer.elapsed)

    def _interpret(self, spec: RequestSpec, response: httpx.Response, latency: float) -> ApiResult:
        """Map an HTTP response onto the dict-or-None contract."""
        status = response.status_code

        if not 200 <= status < 300:
            body = response.text
            self.last_failure = HttpFailure(operation=spec.operation, status_code=status, body=body)
            record_api_request(operation=spec.operation, outcome="http_error", latency_seconds=latency)
            logger.warning(
                "API request failed: operation=%s status=%d body=%s",
                spec.operation,
                status,
                _truncate(body),
            )
            return None

        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            record_api_request(operation=spec.operation, outcome="malformed", latency_seconds=latency)
            logger.warning(
                "API returned HTTP %d without a JSON object body: operation=%s body=%s",
                status,
                spec.operation,
                _truncate(response.text),
            )
            return None

        record_api_request(operation=spec.operation, outcome="success", latency_seconds=latency)
        logger.debug("API request ok: operation=%s status=%d latency=%.3fs", spec.operation, status, latency)
        return data
