"""RFC 5988 style ``Link`` header parsing.

A collection endpoint advertises its neighbouring pages through one or more
``Link`` header lines, each holding comma-separated entries such as::

    <https://maestro.example/api/builds?page=2>; rel="next", <...?page=9>; rel="last"

Only the ``rel`` property is interpreted. Entries that are too short to carry
a URL and properties are dropped; an entry that has properties but no ``rel``
is a contract violation and fails the whole parse.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..config import REL_FIRST, REL_LAST, REL_NEXT, REL_PREV
from .exceptions import MissingRelationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relation:
    """One navigation hint taken from a ``Link`` header entry.

    Attributes:
        href: Target URL with any surrounding angle brackets removed
        rel: Relation name, usually one of first/prev/next/last
    """

    href: str
    rel: str


@dataclass(frozen=True)
class PageLinks:
    """The four navigation links a page understands."""

    first: str | None = None
    prev: str | None = None
    next: str | None = None
    last: str | None = None

    @classmethod
    def from_relations(cls, relations: Iterable[Relation]) -> PageLinks:
        """Resolve each navigation link to the first relation bearing its name."""
        found: dict[str, str] = {}
        for relation in relations:
            # Later duplicates of a relation name are ignored
            found.setdefault(relation.rel, relation.href)
        return cls(
            first=found.get(REL_FIRST),
            prev=found.get(REL_PREV),
            next=found.get(REL_NEXT),
            last=found.get(REL_LAST),
        )


def parse_link_header(headers: str | Iterable[str] | None) -> list[Relation]:
    """Parse one or more raw ``Link`` header values.

    Args:
        headers: A single header value, the values of a repeated header in
            the order received, or None when the header is absent

    Returns:
        Relations in header traversal order, unrecognized names included

    Raises:
        MissingRelationError: If an entry has properties but no ``rel``
    """
    if headers is None:
        return []
    if isinstance(headers, str):
        headers = [headers]
    # Materialized eagerly so a bad entry never yields a partial result
    return [relation for header in headers for relation in _iter_header(header)]


def _iter_header(header: str) -> Iterator[Relation]:
    for entry in header.split(","):
        if not entry:
            continue
        relation = _parse_entry(entry)
        if relation is not None:
            yield relation


def _parse_entry(entry: str) -> Relation | None:
    segments = [segment for segment in entry.split(";") if segment]
    if len(segments) < 2:
        logger.debug("link_entry_dropped", extra={"entry": entry})
        return None

    href = segments[0].strip().removeprefix("<").removesuffix(">")

    props: dict[str, str] = {}
    for segment in segments[1:]:
        prop = _parse_property(segment)
        if prop is not None:
            key, value = prop
            props[key] = value

    rel = props.get("rel")
    if rel is None:
        raise MissingRelationError(entry)
    return Relation(href=href, rel=rel)


def _parse_property(segment: str) -> tuple[str, str] | None:
    key, sep, value = segment.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip().removeprefix('"').removesuffix('"')
