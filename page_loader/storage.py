"""Write the rewritten page and its assets to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup

from .errors import FilesystemError
from .models import DownloadedAsset, OutputBundle

logger = logging.getLogger("page_loader")


def prettify_markup(markup: str) -> str:
    """Canonical formatting used for every saved page."""
    return BeautifulSoup(markup, "html.parser").prettify()


def _create_directory(path: Path) -> None:
    try:
        path.mkdir(exist_ok=True)
    except OSError as exc:
        raise FilesystemError(str(path), "mkdir", exc) from exc


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise FilesystemError(str(path), "write", exc) from exc


def persist(
    bundle: OutputBundle,
    rewritten_markup: str,
    downloaded_assets: Iterable[DownloadedAsset],
) -> Path:
    """Create the assets directory, then write the page followed by every asset.

    The output directory itself must already exist. Files written before a
    failing write are left in place.
    """
    _create_directory(bundle.assets_dir_path)

    page_path = bundle.page_file_path
    _write_bytes(page_path, prettify_markup(rewritten_markup).encode("utf-8"))
    logger.info("Saved page to %s", page_path)

    for asset in downloaded_assets:
        destination = bundle.asset_path(asset.item)
        _write_bytes(destination, asset.content)
        logger.debug("Saved %s to %s", asset.item.source_url, destination)
    return page_path
