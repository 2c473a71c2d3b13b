"""Derive filesystem-friendly names for pages and assets from their URLs."""

from __future__ import annotations

import posixpath
import re
from enum import Enum
from typing import Tuple, Union
from urllib.parse import urlparse

SLUG_PATTERN = re.compile(r"[^A-Za-z0-9]+")
SEPARATOR = "-"
PAGE_EXTENSION = ".html"
ASSETS_DIR_SUFFIX = "_files"

_PAGE_EXTENSIONS = {".html", ".htm"}


class NameKind(str, Enum):
    """What a derived name is going to be used for."""

    PAGE = "page"
    ASSET = "asset"


def slugify(value: str, fallback: str = "page") -> str:
    """Collapse every run of non-alphanumeric characters into a single separator."""
    normalized = SLUG_PATTERN.sub(SEPARATOR, value).strip(SEPARATOR)
    return normalized or fallback


def _split_extension(path: str) -> Tuple[str, str]:
    head, segment = posixpath.split(path)
    stem, extension = posixpath.splitext(segment)
    if len(extension) <= 1:
        return path, ""
    return posixpath.join(head, stem), extension


def derive_name(url: str, kind: Union[NameKind, str] = NameKind.ASSET) -> str:
    """Return the local file name for ``url``.

    The scheme is dropped and host, path and query are slugified. Assets keep
    the extension of their last path segment and fall back to ``.html`` when
    there is none; pages always end with ``.html``.
    """
    kind = NameKind(kind)
    parsed = urlparse(url)
    path, extension = _split_extension(parsed.path)

    if kind is NameKind.PAGE:
        if extension.lower() not in _PAGE_EXTENSIONS:
            path = parsed.path
        extension = PAGE_EXTENSION
    else:
        cleaned = SLUG_PATTERN.sub("", extension)
        extension = f".{cleaned}" if cleaned else PAGE_EXTENSION

    location = parsed.netloc + path
    if parsed.query:
        location = f"{location}?{parsed.query}"
    return slugify(location) + extension


def page_file_name(url: str) -> str:
    return derive_name(url, NameKind.PAGE)


def page_base_name(url: str) -> str:
    """Page name without its extension; shared by the page file and its asset directory."""
    return page_file_name(url)[: -len(PAGE_EXTENSION)]


def assets_dir_name(url: str) -> str:
    return page_base_name(url) + ASSETS_DIR_SUFFIX
