"""Core components."""

from .credentials import BasicAuthenticationCredentials, ServiceCredentials, TokenCredentials
from .exceptions import (
    ApiError,
    ConfigurationError,
    DecodeError,
    LinkHeaderError,
    MaestroError,
    MissingRelationError,
    RequestError,
)
from .links import PageLinks, Relation, parse_link_header
from .request import HttpRequest

__all__ = [
    "HttpRequest",
    "PageLinks",
    "Relation",
    "parse_link_header",
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
