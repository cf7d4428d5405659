"""Lazy cursor that walks a paged collection as one sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from .telemetry import log_page_walk_complete

if TYPE_CHECKING:
    from ...models.page import Page

T = TypeVar("T")


class PageWalker(Generic[T]):
    """Forward-only async iterator over every item reachable from a page.

    Items of the current page are handed out without I/O. Only once the page
    is drained is its ``next`` link fetched, so at most one request is in
    flight and no page is fetched before it is needed. The walker is not
    restartable: iterating it again continues where it stopped.

    Example usage:
        page = await client.get_page("/api/builds", item_type=Build)

        async for build in page.enumerate_all():
            print(build.id)

        # Materialize the whole collection
        builds = await page.enumerate_all().to_list()
    """

    def __init__(self, page: Page[T]) -> None:
        self._page: Page[T] | None = page
        self._position = 0
        self._done = False
        self._fetching = False
        self.pages_fetched = 0
        self.items_yielded = 0

    @property
    def done(self) -> bool:
        return self._done

    @property
    def current_page(self) -> Page[T] | None:
        return self._page

    def __aiter__(self) -> PageWalker[T]:
        return self

    async def __anext__(self) -> T:
        if self._fetching:
            raise RuntimeError("PageWalker advanced while a page fetch is still in flight")
        while True:
            if self._done or self._page is None:
                raise StopAsyncIteration

            page = self._page
            if self._position < len(page):
                item = page[self._position]
                self._position += 1
                self.items_yielded += 1
                return item

            next_link = page.next_link
            if not next_link:
                self._finish()
                log_page_walk_complete(
                    pages_fetched=self.pages_fetched, items_yielded=self.items_yielded
                )
                raise StopAsyncIteration

            # The drained page is released before fetching. If the fetch
            # fails or is cancelled the walker stays terminal.
            self._page = None
            self._position = 0
            self._fetching = True
            try:
                self._page = await page.get_page(next_link)
            finally:
                self._fetching = False
                if self._page is None:
                    self._done = True
            self.pages_fetched += 1

    def _finish(self) -> None:
        self._page = None
        self._position = 0
        self._done = True

    async def to_list(self) -> list[T]:
        """Walk to the end and return every remaining item.

        Warning: This loads all items into memory.
        """
        return [item async for item in self]

    async def take(self, n: int) -> list[T]:
        """Return up to ``n`` items, fetching only the pages they need."""
        result: list[T] = []
        if n <= 0:
            return result
        async for item in self:
            result.append(item)
            if len(result) >= n:
                break
        return result

    async def aclose(self) -> None:
        """Abandon the walk and release the current page."""
        self._finish()
