"""Structured logging for paging operations.

Each helper emits one event-named log record with its fields in ``extra`` so
log handlers can forward them as structured data.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    url: str,
    status: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully built page.

    Args:
        url: URL the page was fetched from
        status: HTTP status of the response
        items: Number of items decoded from the body
        has_next: Whether the page advertises a ``next`` link
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "url": url,
            "status": status,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetch_failed(*, url: str, status: int) -> None:
    """Log a non-success response before the failure handler runs."""
    logger.warning("page_fetch_failed", extra={"url": url, "status": status})


def log_page_walk_complete(*, pages_fetched: int, items_yielded: int) -> None:
    """Log the natural end of a walk.

    Args:
        pages_fetched: Pages fetched by the walker, the starting page excluded
        items_yielded: Items delivered across all pages
    """
    logger.info(
        "page_walk_complete",
        extra={"pages_fetched": pages_fetched, "items_yielded": items_yielded},
    )
