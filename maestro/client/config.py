"""Client configuration.

This module centralizes header names, relation names and defaults used by the
REST runtime, plus the ``ClientConfig`` record an ``ApiClient`` is built from.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

LINK_HEADER = "Link"

# Relation names a page resolves into navigation links
REL_FIRST = "first"
REL_PREV = "prev"
REL_NEXT = "next"
REL_LAST = "last"

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "maestro-client/0.1.0"
DEFAULT_HEADERS = {"Accept": "application/json"}

ENV_PREFIX = "MAESTRO_"


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for an ``ApiClient``.

    Attributes:
        base_url: Root URL relative request paths are joined onto
        timeout: Total per-request timeout in seconds
        token: Optional bearer token sent with every request
        user_agent: Value of the ``User-Agent`` header
        headers: Extra headers sent with every request
    """

    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    token: str | None = None
    user_agent: str = DEFAULT_USER_AGENT
    headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def __post_init__(self) -> None:
        """Validate configuration."""
        # Imported here, exceptions live in core which imports this module
        from .core.exceptions import ConfigurationError

        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> ClientConfig:
        """Build a config from ``<prefix>BASE_URL``, ``TOKEN`` and ``TIMEOUT``.

        Raises:
            ConfigurationError: If the base URL is unset or the timeout is invalid
        """
        from .core.exceptions import ConfigurationError

        base_url = os.environ.get(f"{prefix}BASE_URL", "")
        raw_timeout = os.environ.get(f"{prefix}TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"{prefix}TIMEOUT is not a number: {raw_timeout!r}") from e

        return cls(
            base_url=base_url,
            timeout=timeout,
            token=os.environ.get(f"{prefix}TOKEN") or None,
        )
