from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging

from typing import Optional

from .config import StoreConfig
from .demo import run_demo


def _print_lines(lines: list[str]) -> None:
    print("-" * 40)
    for line in lines:
        print(line)


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="userstore",
        description="Run the user list demo against an in-memory store."
    )
    parser.add_argument("--fetch-delay", type=float, default=None)
    parser.add_argument("--lifetime", type=float, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    config = StoreConfig.from_env()
    overrides = {}

    if args.fetch_delay is not None:
        overrides["fetch_delay"] = args.fetch_delay
    if args.lifetime is not None:
        overrides["lifetime"] = args.lifetime

    config = dataclasses.replace(config, **overrides)

    asyncio.run(run_demo(config=config, renderer=_print_lines))


if __name__ == "__main__":
    main()
