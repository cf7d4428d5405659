"""HTTP client owning the aiohttp session, credentials and body decoder."""

from __future__ import annotations

from collections.abc import AsyncIterator
from functools import lru_cache
from typing import TYPE_CHECKING, Any, TypeVar

import aiohttp
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ...config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ClientConfig
from ...core.credentials import ServiceCredentials, TokenCredentials
from ...core.exceptions import DecodeError
from ...core.request import HttpRequest
from .failure import FailureHandler, raise_for_status

if TYPE_CHECKING:
    from ...models.page import Page

T = TypeVar("T")


@lru_cache(maxsize=128)
def _list_adapter(item_type: Any) -> TypeAdapter[list[Any]]:
    return TypeAdapter(list[item_type])  # type: ignore[valid-type]


class ApiClient:
    """Async API client.

    Shared by every page and walker created from it. Pages never close the
    client; its owner does, typically through ``async with``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        credentials: ServiceCredentials | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url.rstrip("/") if base_url else None
        self.credentials = credentials
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = {**DEFAULT_HEADERS, "User-Agent": user_agent, **(headers or {})}
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_config(cls, config: ClientConfig) -> ApiClient:
        """Create a client from a ``ClientConfig``."""
        credentials = TokenCredentials(config.token) if config.token else None
        return cls(
            base_url=config.base_url,
            credentials=credentials,
            timeout=config.timeout,
            headers=config.headers,
            user_agent=config.user_agent,
        )

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def resolve_url(self, url: str) -> str:
        """Join relative URLs onto ``base_url``; absolute URLs pass through."""
        if self.base_url and not url.startswith(("http://", "https://")):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    def build_request(self, url: str, method: str = "GET") -> HttpRequest:
        return HttpRequest(method=method, url=self.resolve_url(url), headers=dict(self.headers))

    def send(self, request: HttpRequest) -> Any:
        """Send ``request``; use the result as an async context manager.

        Leaving the context releases the response on every exit path.
        """
        return self.session.request(request.method, request.url, headers=request.headers)

    def deserialize(self, content: str, item_type: Any = Any, url: str | None = None) -> list[Any]:
        """Decode a JSON array body into a list of ``item_type``.

        Raises:
            DecodeError: If the body is not a JSON array of ``item_type``
        """
        try:
            return _list_adapter(item_type).validate_json(content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Could not decode response body as list[{getattr(item_type, '__name__', item_type)}]: "
                f"{e.error_count()} error(s)",
                url=url,
            ) from e

    async def get_page(
        self,
        path: str,
        item_type: type[T] | Any = Any,
        on_failure: FailureHandler = raise_for_status,
    ) -> Page[T]:
        """Fetch the first page of the collection at ``path``."""
        from ..paging.fetcher import PageFetcher

        fetcher: PageFetcher[T] = PageFetcher(self, item_type=item_type, on_failure=on_failure)
        return await fetcher.fetch(path)

    async def enumerate_all(
        self,
        path: str,
        item_type: type[T] | Any = Any,
        on_failure: FailureHandler = raise_for_status,
    ) -> AsyncIterator[T]:
        """Yield every item of the collection at ``path`` across all pages."""
        page = await self.get_page(path, item_type=item_type, on_failure=on_failure)
        async for item in page.enumerate_all():
            yield item

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> ApiClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
