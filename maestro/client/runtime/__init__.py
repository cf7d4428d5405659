"""Runtime components: REST transport and paging."""

from .paging import PageFetcher, PageWalker
from .rest import ApiClient, FailureHandler, LogFailures, raise_for_status

__all__ = [
    "ApiClient",
    "FailureHandler",
    "LogFailures",
    "PageFetcher",
    "PageWalker",
    "raise_for_status",
]
