"""Handlers invoked when a page request gets a non-success response.

A handler receives the sent request and the open response before the body is
decoded. Raising aborts the fetch; returning lets the fetch go on to decode
whatever body the server sent. Both sync and async callables are accepted.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable
from typing import Protocol

import aiohttp

from ...core.exceptions import ApiError
from ...core.request import HttpRequest

logger = logging.getLogger(__name__)


class FailureHandler(Protocol):
    def __call__(
        self, request: HttpRequest, response: aiohttp.ClientResponse
    ) -> Awaitable[None] | None: ...


async def raise_for_status(request: HttpRequest, response: aiohttp.ClientResponse) -> None:
    """Default handler: raise ``ApiError`` carrying the error body."""
    try:
        body: str | None = await response.text()
    except (aiohttp.ClientError, UnicodeDecodeError):
        body = None
    raise ApiError(
        f"{request.method} {request.url} failed with status {response.status} {response.reason or ''}".rstrip(),
        status_code=response.status,
        url=request.url,
        reason=response.reason,
        body=body,
    )


class LogFailures:
    """Log the failed response and let the fetch continue."""

    def __init__(self, level: int = logging.WARNING) -> None:
        self.level = level

    async def __call__(self, request: HttpRequest, response: aiohttp.ClientResponse) -> None:
        logger.log(
            self.level,
            "request_failed",
            extra={
                "method": request.method,
                "url": request.url,
                "status": response.status,
                "reason": response.reason,
            },
        )


async def invoke_failure_handler(
    handler: FailureHandler, request: HttpRequest, response: aiohttp.ClientResponse
) -> None:
    result = handler(request, response)
    if inspect.isawaitable(result):
        await result
