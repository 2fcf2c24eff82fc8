"""
core/errors.py — Exception taxonomy for the ToMusic client and tone math.

Precondition violations are raised immediately; HTTP-level failures from the
remote service are never raised (the client returns ``None`` instead), so
every class here describes something the caller can act on.

Hierarchy:
    TransportError           RuntimeError       server never reached
    SampleFileNotFoundError  FileNotFoundError  upload path missing/unreadable
    OutOfRangeError          ValueError         MIDI note / frequency domain
    EmptyInputError          ValueError         no intervals to average

Each error also derives from the matching builtin exception.
"""

from __future__ import annotations


class TransportError(RuntimeError):
    """Raised when an HTTP exchange could not be completed.

    Covers connection refused, DNS failure, timeouts and protocol errors: anything
    where no HTTP status was received. A non-2xx response is NOT a
    transport error.

    Args:
        operation: Logical operation name, e.g. ``"generate"``.
        url: Target URL of the failed request.
        reason: Short description taken from the underlying exception.
    """

    def __init__(self, operation: str, url: str, reason: str) -> None:
        """Initialize with the operation, URL and failure reason."""
        self.operation = operation
        self.url = url
        self.reason = reason
        super().__init__(f"{operation} request to {url} failed: {reason}")


class SampleFileNotFoundError(FileNotFoundError):
    """Raised when an upload path is not an existing, readable file."""

    def __init__(self, path: str) -> None:
        """Initialize with the offending path."""
        self.path = path
        super().__init__(f"File not found: {path}")


class OutOfRangeError(ValueError):
    """Raised when a numeric argument lies outside the function's domain."""


class EmptyInputError(ValueError):
    """Raised when a function needs at least one value and got none."""
