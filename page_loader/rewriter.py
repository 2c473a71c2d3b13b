"""Point asset references at their local copies."""

from __future__ import annotations

import logging
import posixpath
from typing import Dict, Iterable, List, Tuple

from bs4 import BeautifulSoup

from .models import AssetReference, DownloadItem
from .naming import NameKind, derive_name

logger = logging.getLogger("page_loader")


def rewrite(
    document: BeautifulSoup,
    references: Iterable[AssetReference],
    assets_dir: str,
) -> Tuple[str, List[DownloadItem]]:
    """Rewrite each reference in place and return the markup plus the download plan.

    Every occurrence of a URL is rewritten, but the plan lists each URL once.
    Two distinct URLs that derive the same name share a local path; the one
    written last wins.
    """
    planned: Dict[str, DownloadItem] = {}
    owners: Dict[str, str] = {}
    plan: List[DownloadItem] = []

    for reference in references:
        item = planned.get(reference.source_url)
        if item is None:
            name = derive_name(reference.source_url, NameKind.ASSET)
            item = DownloadItem(
                source_url=reference.source_url,
                local_path=posixpath.join(assets_dir, name),
            )
            previous = owners.setdefault(item.local_path, item.source_url)
            if previous != item.source_url:
                logger.warning(
                    "%s and %s both map to %s; the later download overwrites the earlier",
                    previous,
                    item.source_url,
                    item.local_path,
                )
            planned[reference.source_url] = item
            plan.append(item)
        if reference.element is not None:
            reference.element[reference.attribute_name] = item.local_path

    return str(document), plan
