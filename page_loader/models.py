"""Data models used throughout the page loading pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional


@dataclass
class AssetReference:
    """Same-origin asset discovered while scanning the page markup."""

    source_url: str
    tag_name: str
    attribute_name: str
    element: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class DownloadItem:
    """Single entry of the download plan."""

    source_url: str
    local_path: str


@dataclass
class FetchedResource:
    """Body and metadata of a successful HTTP response."""

    url: str
    content: bytes
    content_type: str = ""
    encoding: Optional[str] = None


@dataclass
class DownloadedAsset:
    """Plan entry together with the bytes fetched for it."""

    item: DownloadItem
    content: bytes
    content_type: str = ""


@dataclass
class OutputBundle:
    """Where one run writes the page and its assets."""

    output_dir: Path
    base_name: str
    assets_dir_name: str

    @property
    def page_file_path(self) -> Path:
        return self.output_dir / f"{self.base_name}.html"

    @property
    def assets_dir_path(self) -> Path:
        return self.output_dir / self.assets_dir_name

    def asset_path(self, item: DownloadItem) -> Path:
        return self.output_dir / item.local_path
