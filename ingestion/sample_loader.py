"""
ingestion/sample_loader.py — File I/O boundary for sample uploads.

This is the ONLY module in the client that reads files from disk. The API
client receives a ready ``MultipartUpload`` and never touches paths itself.

Usage:
    from ingestion.sample_loader import load_sample
    upload = load_sample("/path/to/loop.wav")
"""

from __future__ import annotations

import mimetypes
import os
from pathlib import Path

from core.api.types import MultipartUpload
from core.errors import SampleFileNotFoundError

DEFAULT_MIME_TYPE: str = "application/octet-stream"
"""Sent when the extension gives no hint about the content type."""

UPLOAD_FIELD: str = "file"
"""Multipart form field the remote service reads the sample from."""


def guess_mime_type(path: str | Path) -> str:
    """Infer a MIME type from the file extension.

    Args:
        path: File path; only the name is inspected.

    Returns:
        MIME type such as ``audio/x-wav``, or ``DEFAULT_MIME_TYPE``.
    """
    mime_type, _ = mimetypes.guess_type(str(path), strict=False)
    return mime_type or DEFAULT_MIME_TYPE


def load_sample(path: str | Path) -> MultipartUpload:
    """Read a local file into a multipart upload body.

    Args:
        path: Absolute or relative path to the sample file.

    Returns:
        MultipartUpload with the file bytes, base name and inferred MIME type.

    Raises:
        SampleFileNotFoundError: Path does not exist, is not a regular file,
            or is not readable by the current process.
    """
    file_path = Path(path)

    if not file_path.is_file() or not os.access(file_path, os.R_OK):
        raise SampleFileNotFoundError(str(path))

    try:
        content = file_path.read_bytes()
    except OSError as exc:
        # Permissions can change between the access check and the read
        raise SampleFileNotFoundError(str(path)) from exc

    return MultipartUpload(
        filename=file_path.name,
        content=content,
        mime_type=guess_mime_type(file_path),
        form_field=UPLOAD_FIELD,
    )
