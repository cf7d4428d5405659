#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from maestro.client import ApiClient, ClientConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk every page of a paged collection")
    p.add_argument("path", nargs="?", default="/api/channels")
    p.add_argument("--limit", type=int, default=None, help="stop after this many items")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    async with ApiClient.from_config(ClientConfig.from_env()) as client:
        page = await client.get_page(args.path)
        print("=" * 65)
        print(f"First page : {len(page)} items")
        print(f"Next       : {page.next_link}")
        print(f"Last       : {page.last_link}")
        print("=" * 65)

        walker = page.enumerate_all()
        items = await walker.take(args.limit) if args.limit else await walker.to_list()
        for item in items:
            print(item)
        print("-" * 65)
        print(f"{len(items)} items across {walker.pages_fetched + 1} page(s)")


if __name__ == "__main__":
    asyncio.run(main())
