"""
core/api/types.py — Request strategy and diagnostic types for the ToMusic API.

A request body is one of two variants:

    JsonBody         mapping → json.dumps → Content-Type: application/json
    MultipartUpload  file bytes + filename + MIME type → multipart/form-data

Both expose ``encode()``, returning the keyword arguments for
``httpx.Client.request``. The client therefore has a single send path and
never branches on an "is upload" flag; a file can never be JSON-serialized
because the two variants are distinct types.

Pure: no I/O, no httpx import.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

ApiResult = Union[dict[str, Any], None]
"""Decoded JSON object on success, ``None`` on any HTTP-level failure."""

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class JsonBody:
    """JSON request payload."""

    payload: Mapping[str, Any]

    def encode(self) -> dict[str, Any]:
        """Serialize the payload and declare its content type."""
        return {
            "content": json.dumps(dict(self.payload)),
            "headers": {"Content-Type": JSON_CONTENT_TYPE},
        }


@dataclass(frozen=True)
class MultipartUpload:
    """A single file sent as a multipart form field.

    ``content`` is excluded from ``repr`` so logging a spec never dumps audio.
    """

    filename: str
    content: bytes = field(repr=False)
    mime_type: str
    form_field: str = "file"

    def encode(self) -> dict[str, Any]:
        """Build the ``files`` argument; httpx sets the multipart boundary."""
        return {"files": {self.form_field: (self.filename, self.content, self.mime_type)}}


RequestBody = Union[JsonBody, MultipartUpload]


@dataclass(frozen=True)
class RequestSpec:
    """One logical API call, built per invocation and never persisted.

    Attributes:
        operation: Low-cardinality label for logs and metrics
            (``"generate"``, ``"track_info"``, ``"upload"``).
        method: HTTP method.
        path: Absolute API path, already escaped.
        body: Request body variant, or None for body-less requests.
    """

    operation: str
    method: str
    path: str
    body: RequestBody | None = None

    def encode(self) -> dict[str, Any]:
        """Keyword arguments for the body, empty when there is none."""
        if self.body is None:
            return {}
        return self.body.encode()


@dataclass(frozen=True)
class HttpFailure:
    """A non-2xx response, kept for diagnostics only.

    Attributes:
        operation: Operation label of the failed request.
        status_code: HTTP status returned by the server.
        body: Raw response text.
    """

    operation: str
    status_code: int
    body: str
