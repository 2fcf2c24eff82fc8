"""
Configuration dataclasses for the ToMusic API client.

These immutable config objects decouple connection parameters from the client
constructor, making it easy to point a client at a different origin (staging,
a local stub) or to tighten the timeout without touching call sites.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

ALLOWED_SCHEMES: frozenset[str] = frozenset({"http", "https"})


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for ``MusicAiClient``.

    Attributes:
        base_url: Origin of the remote API, without a trailing slash.
            Defaults to the public ToMusic host.
        timeout_seconds: Per-request timeout applied to connect, read and
            write. Defaults to 30 seconds.

    Example:
        >>> config = ClientConfig(timeout_seconds=5.0)
        >>> config.url_for("/generate")
        'https://tomusic.ai/generate'
    """

    base_url: str = "https://tomusic.ai"
    timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        parts = urlsplit(self.base_url)
        if parts.scheme not in ALLOWED_SCHEMES or not parts.netloc:
            raise ValueError(
                f"base_url must be an absolute http(s) URL, got {self.base_url!r}"
            )
        if self.base_url.endswith("/"):
            raise ValueError(f"base_url must not end with '/', got {self.base_url!r}")
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    def url_for(self, path: str) -> str:
        """Join ``base_url`` with an absolute API path such as ``/generate``."""
        if not path.startswith("/"):
            raise ValueError(f"path must start with '/', got {path!r}")
        return f"{self.base_url}{path}"


DEFAULT_CONFIG = ClientConfig()
"""Public ToMusic host with a 30 second timeout."""
