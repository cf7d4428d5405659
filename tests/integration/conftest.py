"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from maestro.client import ApiClient, ClientConfig

# Skip all integration tests unless RUN_MAESTRO_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_MAESTRO_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_MAESTRO_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig.from_env()


@pytest_asyncio.fixture
async def client(config: ClientConfig):
    async with ApiClient.from_config(config) as api:
        yield api
