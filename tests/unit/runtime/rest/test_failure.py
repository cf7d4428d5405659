"""Unit tests for failure handlers."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from maestro.client.core import ApiError, HttpRequest
from maestro.client.runtime.rest import LogFailures, invoke_failure_handler, raise_for_status


def make_response(status: int, reason: str, body: str = ""):
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.text = AsyncMock(return_value=body)
    return response


class TestRaiseForStatus:
    """Test the default failure handler."""

    @pytest.mark.asyncio
    async def test_raises_api_error(self):
        """Test ApiError carries status, reason and body."""
        request = HttpRequest("GET", "http://x/builds")
        response = make_response(401, "Unauthorized", '{"error": "token expired"}')

        with pytest.raises(ApiError) as exc_info:
            await raise_for_status(request, response)

        error = exc_info.value
        assert error.status_code == 401
        assert error.reason == "Unauthorized"
        assert error.body == '{"error": "token expired"}'
        assert error.url == "http://x/builds"
        assert str(error) == "GET http://x/builds failed with status 401 Unauthorized"

    @pytest.mark.asyncio
    async def test_unreadable_body(self):
        """Test a body read failure still raises ApiError."""
        response = make_response(502, "Bad Gateway")
        response.text = AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))

        with pytest.raises(ApiError) as exc_info:
            await raise_for_status(HttpRequest("GET", "http://x/a"), response)
        assert exc_info.value.body is None


class TestLogFailures:
    """Test the logging failure handler."""

    @pytest.mark.asyncio
    async def test_logs_and_returns(self, caplog):
        """Test LogFailures logs at its level without raising."""
        handler = LogFailures(level=logging.ERROR)

        with caplog.at_level(logging.ERROR):
            await handler(HttpRequest("GET", "http://x/a"), make_response(500, "Server Error"))

        record = caplog.records[-1]
        assert record.getMessage() == "request_failed"
        assert record.levelno == logging.ERROR
        assert record.status == 500
        assert record.url == "http://x/a"


class TestInvokeFailureHandler:
    """Test sync and async handler invocation."""

    @pytest.mark.asyncio
    async def test_sync_handler(self):
        """Test plain callables are called once."""
        handler = MagicMock(return_value=None)
        request, response = HttpRequest("GET", "http://x/a"), make_response(500, "x")

        await invoke_failure_handler(handler, request, response)

        handler.assert_called_once_with(request, response)

    @pytest.mark.asyncio
    async def test_async_handler(self):
        """Test coroutine handlers are awaited."""
        handler = AsyncMock(return_value=None)

        await invoke_failure_handler(handler, HttpRequest("GET", "http://x/a"), make_response(500, "x"))

        handler.assert_awaited_once()
