"""Fetch capability that turns a page link into a ``Page``."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from contextlib import AsyncExitStack, contextmanager
from time import perf_counter
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import aiohttp

from ...config import LINK_HEADER
from ...core.exceptions import DecodeError, RequestError
from ...core.request import HttpRequest
from ...models.page import Page
from ..rest.failure import FailureHandler, invoke_failure_handler, raise_for_status
from .telemetry import log_page_fetch_failed, log_page_fetched

if TYPE_CHECKING:
    from ..rest.http_client import ApiClient

T = TypeVar("T")


@contextmanager
def _transport_errors(request: HttpRequest) -> Iterator[None]:
    try:
        yield
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise RequestError(f"{request.method} {request.url} failed: {e!r}", url=request.url) from e


class PageFetcher(Generic[T]):
    """Issues GET requests for page links and builds ``Page`` objects.

    The fetcher binds the shared client, the item type pages decode into and
    the failure handler. Every page it builds refers back to it, so links
    followed from any page are fetched the same way.
    """

    def __init__(
        self,
        client: ApiClient,
        item_type: type[T] | Any = Any,
        on_failure: FailureHandler = raise_for_status,
    ) -> None:
        """Initialize page fetcher.

        Args:
            client: Client used for credentials, sending and decoding
            item_type: Type each element of the JSON array decodes into
            on_failure: Handler for non-success responses
        """
        self.client = client
        self.item_type = item_type
        self.on_failure = on_failure

    async def fetch(self, link: str) -> Page[T]:
        """Fetch ``link`` and build a page from its body and ``Link`` headers.

        The request is suspended while sending and while reading the body.
        Cancelling the calling task aborts the request and nothing is built
        from a partially received response.

        Raises:
            RequestError: On transport failure or timeout
            DecodeError: If the body is not text or not a JSON array of the item type
            MissingRelationError: If a ``Link`` entry lacks ``rel``
        """
        request = self.client.build_request(link)
        if self.client.credentials is not None:
            await self.client.credentials.process_request(request)

        start = perf_counter()
        async with AsyncExitStack() as stack:
            with _transport_errors(request):
                response = await stack.enter_async_context(self.client.send(request))

            status = response.status
            if not 200 <= status < 300:
                log_page_fetch_failed(url=request.url, status=status)
                # Whatever the handler raises reaches the caller unchanged
                await invoke_failure_handler(self.on_failure, request, response)

            with _transport_errors(request):
                try:
                    content = await response.text()
                except UnicodeDecodeError as e:
                    raise DecodeError(
                        f"Response body from {request.url} is not valid text: {e}", url=request.url
                    ) from e
            link_headers = response.headers.getall(LINK_HEADER, [])

        items = self.client.deserialize(content, self.item_type, url=request.url)
        page: Page[T] = Page.from_response(items, link_headers, fetcher=self)

        log_page_fetched(
            url=request.url,
            status=status,
            items=len(page),
            has_next=page.has_next,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page
