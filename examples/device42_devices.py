#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from laakhay.inventory import Device42RESTConnector


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List Device42 devices via REST")
    p.add_argument("--url", default=os.environ.get("D42_URL"))
    p.add_argument("--username", default=os.environ.get("D42_USERNAME"))
    p.add_argument("--password", default=os.environ.get("D42_PASSWORD"))
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="extra query parameter (repeatable)",
    )
    p.add_argument("--raw", action="store_true", help="print raw records instead of devices")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()
    for name in ("url", "username", "password"):
        if not getattr(args, name):
            p.error(f"--{name} is required (or set D42_{name.upper()})")
    return args


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    query = dict(item.split("=", 1) for item in args.param)

    async with Device42RESTConnector(
        url=args.url,
        username=args.username,
        password=args.password,
        page_size=args.page_size,
    ) as d42:
        if args.raw:
            async for record in d42.fetch_raw_device_details(query):
                print(record)
            return

        print(f"{'ID':>6} | {'Name':30} | {'Serial':20} | {'Model':25} | {'RAM GB':>6}")
        print("-" * 99)
        count = 0
        async for d in d42.fetch_devices(query):
            ram = "-" if d.ram_gb is None else str(d.ram_gb)
            print(
                f"{d.device_id:>6} | {d.name:30} | {d.serial_no:20} | {d.hardware or '-':25} | {ram:>6}"
            )
            count += 1
        print("-" * 99)
        print(f"Devices: {count}")


if __name__ == "__main__":
    asyncio.run(main())
