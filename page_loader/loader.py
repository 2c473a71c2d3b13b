"""High-level orchestration: fetch a page, localize its assets, save everything."""

from __future__ import annotations

import logging
import os
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union
from urllib.parse import urlparse

from .config import FetchConfig
from .content import parse_markup, scan
from .errors import InvalidURLError
from .fetcher import ResourceFetcher
from .models import DownloadedAsset, DownloadItem, OutputBundle
from .naming import assets_dir_name, page_base_name
from .rewriter import rewrite
from .storage import persist

logger = logging.getLogger("page_loader")

PathLike = Union[str, os.PathLike]


def validate_page_url(page_url: str) -> None:
    parsed = urlparse(page_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError(page_url)


def build_bundle(page_url: str, output_dir: Optional[PathLike] = None) -> OutputBundle:
    """Compute where the page and its assets will be written."""
    root = Path(output_dir).absolute() if output_dir is not None else Path.cwd()
    return OutputBundle(
        output_dir=root,
        base_name=page_base_name(page_url),
        assets_dir_name=assets_dir_name(page_url),
    )


def fetch_assets(
    fetcher: ResourceFetcher,
    plan: Sequence[DownloadItem],
    max_workers: int,
) -> List[DownloadedAsset]:
    """Download every planned asset on a bounded thread pool.

    Results keep the order of ``plan`` regardless of completion order. The
    first failure cancels downloads that have not started yet and is raised;
    when several downloads fail together the earliest in the plan wins.
    """
    if not plan:
        return []

    slots: List[Optional[DownloadedAsset]] = [None] * len(plan)
    pool = ThreadPoolExecutor(
        max_workers=max(1, min(max_workers, len(plan))),
        thread_name_prefix="page-loader",
    )
    try:
        futures: Dict[Future, int] = {
            pool.submit(fetcher.fetch, item.source_url): index
            for index, item in enumerate(plan)
        }
        pending = set(futures)
        while pending:
            done, pending = wait(pending, return_when=FIRST_EXCEPTION)
            failed = sorted(
                (future for future in done if future.exception() is not None),
                key=futures.__getitem__,
            )
            if failed:
                for future in pending:
                    future.cancel()
                raise failed[0].exception()
            for future in done:
                index = futures[future]
                resource = future.result()
                slots[index] = DownloadedAsset(
                    item=plan[index],
                    content=resource.content,
                    content_type=resource.content_type,
                )
                logger.info("Downloaded %s", plan[index].source_url)
    finally:
        pool.shutdown(wait=True, cancel_futures=True)

    return [asset for asset in slots if asset is not None]


def load_page(
    page_url: str,
    output_dir: Optional[PathLike] = None,
    *,
    config: Optional[FetchConfig] = None,
    max_workers: Optional[int] = None,
    fetcher: Optional[ResourceFetcher] = None,
) -> Path:
    """Save ``page_url`` with its same-origin assets and return the page file path.

    Nothing is written unless the page and every asset were fetched. Any
    failure propagates as a :class:`~page_loader.errors.PageLoaderError`.
    """
    validate_page_url(page_url)
    config = config or FetchConfig()
    workers = max_workers if max_workers is not None else config.max_workers
    bundle = build_bundle(page_url, output_dir)

    owns_fetcher = fetcher is None
    fetcher = fetcher or ResourceFetcher(config)
    try:
        logger.info("Loading %s", page_url)
        page = fetcher.fetch(page_url)

        document = parse_markup(page.content, encoding=page.encoding)
        references = list(scan(document, page_url))
        logger.debug("Found %d local resources on %s", len(references), page_url)

        rewritten, plan = rewrite(document, references, bundle.assets_dir_name)
        assets = fetch_assets(fetcher, plan, workers)

        page_path = persist(bundle, rewritten, assets)
    finally:
        if owns_fetcher:
            fetcher.close()

    logger.info("Saved %s with %d assets", page_path, len(assets))
    return page_path
