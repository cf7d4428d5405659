"""Single fetched page of a collection resource."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from ..core.exceptions import MaestroError
from ..core.links import PageLinks, Relation, parse_link_header

if TYPE_CHECKING:
    from ..runtime.paging.fetcher import PageFetcher
    from ..runtime.paging.walker import PageWalker
    from ..runtime.rest.http_client import ApiClient

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Sequence, Generic[T]):
    """Immutable snapshot of one server response.

    A page is a finite container over the items of that one response only.
    ``len(page)`` is not the size of the whole collection; that is only known
    by walking every page via ``enumerate_all()``.

    The page keeps a reference to the ``PageFetcher`` that produced it so it
    can follow its own navigation links. The fetcher is shared, not owned.

    Attributes:
        items: Decoded items in server order
        relations: Every relation parsed from the ``Link`` header(s)
        fetcher: Fetch capability used to follow links
        links: First/prev/next/last links resolved from ``relations``
    """

    items: tuple[T, ...]
    relations: tuple[Relation, ...] = ()
    fetcher: PageFetcher[T] | None = field(default=None, repr=False, compare=False)
    links: PageLinks = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "relations", tuple(self.relations))
        object.__setattr__(self, "links", PageLinks.from_relations(self.relations))

    @classmethod
    def from_response(
        cls,
        items: Iterable[T],
        link_headers: Iterable[str] | None,
        fetcher: PageFetcher[T] | None = None,
    ) -> Page[T]:
        """Build a page from decoded items and raw ``Link`` header values.

        Raises:
            MissingRelationError: If a link entry has no ``rel``
        """
        relations = parse_link_header(link_headers)
        return cls(items=tuple(items), relations=tuple(relations), fetcher=fetcher)

    # Navigation links

    @property
    def first_link(self) -> str | None:
        return self.links.first

    @property
    def prev_link(self) -> str | None:
        return self.links.prev

    @property
    def next_link(self) -> str | None:
        return self.links.next

    @property
    def last_link(self) -> str | None:
        return self.links.last

    @property
    def has_next(self) -> bool:
        """True when the server advertised a non-empty ``next`` link."""
        return bool(self.links.next)

    @property
    def client(self) -> ApiClient | None:
        """Client this page was fetched with, if bound."""
        return self.fetcher.client if self.fetcher is not None else None

    # Link following

    async def get_page(self, link: str) -> Page[T]:
        """Fetch the page at ``link`` with the same client and failure handler."""
        if self.fetcher is None:
            raise MaestroError("Page is not bound to a fetcher and cannot follow links")
        return await self.fetcher.fetch(link)

    async def fetch_next(self) -> Page[T] | None:
        return await self._follow(self.links.next)

    async def fetch_prev(self) -> Page[T] | None:
        return await self._follow(self.links.prev)

    async def fetch_first(self) -> Page[T] | None:
        return await self._follow(self.links.first)

    async def fetch_last(self) -> Page[T] | None:
        return await self._follow(self.links.last)

    async def _follow(self, link: str | None) -> Page[T] | None:
        if not link:
            return None
        return await self.get_page(link)

    def enumerate_all(self) -> PageWalker[T]:
        """Walk this page and every page reachable through ``next`` links."""
        from ..runtime.paging.walker import PageWalker

        return PageWalker(self)

    # Sequence protocol over this page's items only

    def __len__(self) -> int:
        return len(self.items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: Any) -> Any:
        return self.items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)
