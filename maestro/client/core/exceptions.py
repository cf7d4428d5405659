"""Custom exception hierarchy."""

from __future__ import annotations


class MaestroError(Exception):
    """Base exception for all client errors."""

    pass


class ConfigurationError(MaestroError):
    """Client configuration is invalid."""

    pass


class LinkHeaderError(MaestroError):
    """A ``Link`` header could not be interpreted."""

    def __init__(self, message: str, entry: str | None = None) -> None:
        super().__init__(message)
        self.entry = entry


class MissingRelationError(LinkHeaderError):
    """A ``Link`` header entry carries no ``rel`` property."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Link entry has no 'rel' property: {entry.strip()!r}", entry=entry)


class RequestError(MaestroError):
    """The HTTP request could not be completed."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ApiError(RequestError):
    """Server answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        reason: str | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message, url=url)
        self.status_code = status_code
        self.reason = reason
        self.body = body


class DecodeError(MaestroError):
    """Response body could not be decoded into the requested item type."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url
