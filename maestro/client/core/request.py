"""Outgoing HTTP request record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HttpRequest:
    """A request about to be sent.

    Mutable until sent so credential providers can decorate it.

    Attributes:
        method: HTTP method
        url: Absolute request URL
        headers: Request headers
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
