"""Command-line entry point for the page loader."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT, FetchConfig
from .errors import PageLoaderError
from .loader import load_page

logger = logging.getLogger("page_loader.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="page-loader",
        description="Download a web page together with its local images, styles and scripts.",
    )
    parser.add_argument("url", help="Absolute URL of the page to save")
    parser.add_argument(
        "-o",
        "--output",
        default=Path.cwd(),
        type=Path,
        help="Existing directory where the page and its assets should be written (default: current directory)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_MAX_WORKERS,
        help="Maximum number of assets downloaded concurrently",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="Override the User-Agent header sent with every request",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    overall_start = time.perf_counter()
    try:
        config = FetchConfig(
            timeout=args.timeout,
            user_agent=args.user_agent,
            max_workers=args.workers,
        )
        page_path = load_page(args.url, args.output, config=config)
    except (PageLoaderError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.debug("Finished in %.2fs", time.perf_counter() - overall_start)
    print(f"Page was successfully downloaded into '{page_path}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
