"""Paged collection traversal."""

from .fetcher import PageFetcher
from .walker import PageWalker

__all__ = ["PageFetcher", "PageWalker"]
