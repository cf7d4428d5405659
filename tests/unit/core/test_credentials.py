"""Unit tests for credential providers."""

from __future__ import annotations

import pytest

from maestro.client.core import BasicAuthenticationCredentials, HttpRequest, TokenCredentials


class TestTokenCredentials:
    """Test TokenCredentials."""

    @pytest.mark.asyncio
    async def test_sets_bearer_header(self):
        """Test the token is sent as a bearer Authorization header."""
        request = HttpRequest("GET", "http://x/a", headers={"Accept": "application/json"})
        await TokenCredentials("secret").process_request(request)

        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_custom_scheme(self):
        """Test a custom auth scheme."""
        request = HttpRequest("GET", "http://x/a")
        await TokenCredentials("secret", scheme="Token").process_request(request)
        assert request.headers["Authorization"] == "Token secret"

    def test_empty_token_rejected(self):
        """Test empty tokens are rejected."""
        with pytest.raises(ValueError):
            TokenCredentials("")


@pytest.mark.asyncio
async def test_basic_authentication():
    """Test Basic credentials are base64 encoded."""
    request = HttpRequest("GET", "http://x/a")
    await BasicAuthenticationCredentials("user", "pass").process_request(request)
    assert request.headers["Authorization"] == "Basic dXNlcjpwYXNz"
