"""Maestro Client - async paged REST collection access."""

from .config import ClientConfig
from .core import (
    ApiError,
    BasicAuthenticationCredentials,
    ConfigurationError,
    DecodeError,
    HttpRequest,
    LinkHeaderError,
    MaestroError,
    MissingRelationError,
    PageLinks,
    Relation,
    RequestError,
    ServiceCredentials,
    TokenCredentials,
    parse_link_header,
)
from .models import Page
from .runtime import (
    ApiClient,
    FailureHandler,
    LogFailures,
    PageFetcher,
    PageWalker,
    raise_for_status,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "ApiClient",
    "ClientConfig",
    "HttpRequest",
    # Paging
    "Page",
    "PageLinks",
    "PageFetcher",
    "PageWalker",
    "Relation",
    "parse_link_header",
    # Failure handling
    "FailureHandler",
    "LogFailures",
    "raise_for_status",
    # Credentials
    "ServiceCredentials",
    "TokenCredentials",
    "BasicAuthenticationCredentials",
    # Exceptions
    "MaestroError",
    "ConfigurationError",
    "LinkHeaderError",
    "MissingRelationError",
    "RequestError",
    "ApiError",
    "DecodeError",
]
