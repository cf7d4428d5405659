"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from maestro.client.core import (
    ApiError,
    DecodeError,
    LinkHeaderError,
    MaestroError,
    MissingRelationError,
    RequestError,
)


def test_api_error_is_request_error():
    """Test ApiError carries status and is caught as RequestError."""
    error = ApiError("boom", status_code=503, url="http://x/a", reason="Service Unavailable")
    assert error.status_code == 503
    assert error.url == "http://x/a"
    assert isinstance(error, RequestError)
    assert isinstance(error, MaestroError)


def test_missing_relation_error_keeps_entry():
    """Test MissingRelationError reports the offending entry."""
    error = MissingRelationError(' <http://x/a>; title="t"')
    assert error.entry == ' <http://x/a>; title="t"'
    assert "<http://x/a>" in str(error)
    assert isinstance(error, LinkHeaderError)


def test_decode_error_with_url():
    """Test DecodeError with url."""
    error = DecodeError("bad body", url="http://x/a")
    assert str(error) == "bad body"
    assert error.url == "http://x/a"
    assert isinstance(error, MaestroError)
