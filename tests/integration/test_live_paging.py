"""Integration tests against a live paged collection.

``MAESTRO_BASE_URL`` must point at a server whose ``MAESTRO_COLLECTION_PATH``
(default ``/api/channels``) returns a JSON array with ``Link`` headers.
"""

import os

import pytest

COLLECTION_PATH = os.environ.get("MAESTRO_COLLECTION_PATH", "/api/channels")

pytestmark = [
    pytest.mark.skipif(
        os.environ.get("RUN_MAESTRO_NETWORK_TESTS") != "1",
        reason="Requires network access. Set RUN_MAESTRO_NETWORK_TESTS=1 to run",
    ),
    pytest.mark.asyncio,
]


async def test_first_page_is_list(client):
    """Test the first page decodes into a finite list."""
    page = await client.get_page(COLLECTION_PATH)
    assert len(page) == len(list(page))


async def test_walk_covers_first_page(client):
    """Test walking starts with exactly the first page's items."""
    page = await client.get_page(COLLECTION_PATH)
    items = await page.enumerate_all().take(len(page))
    assert items == list(page)
