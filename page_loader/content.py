"""HTML parsing and asset discovery."""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple, Union
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from .models import AssetReference

logger = logging.getLogger("page_loader")

ASSET_ATTRIBUTES: Tuple[Tuple[str, str], ...] = (
    ("img", "src"),
    ("link", "href"),
    ("script", "src"),
)

_FETCHABLE_SCHEMES = {"http", "https"}

Markup = Union[str, bytes, BeautifulSoup]


def parse_markup(markup: Markup, encoding: Optional[str] = None) -> BeautifulSoup:
    """Build a tolerant element tree; malformed markup never raises.

    ``encoding`` is the charset declared by the server and only applies to
    byte input; without it BeautifulSoup sniffs the bytes.
    """
    if isinstance(markup, BeautifulSoup):
        return markup
    if isinstance(markup, bytes) and encoding:
        return BeautifulSoup(markup, "html.parser", from_encoding=encoding)
    return BeautifulSoup(markup, "html.parser")


def is_same_origin(url: str, base_url: str) -> bool:
    """True when ``url`` is fetchable over http(s) from the same host as ``base_url``."""
    parsed = urlparse(url)
    if parsed.scheme not in _FETCHABLE_SCHEMES:
        return False
    base = urlparse(base_url)
    try:
        return (parsed.hostname, parsed.port) == (base.hostname, base.port)
    except ValueError:
        return False


def scan(markup: Markup, base_url: str) -> Iterator[AssetReference]:
    """Yield same-origin asset references in document order."""
    soup = parse_markup(markup)
    attributes = dict(ASSET_ATTRIBUTES)
    for tag in soup.find_all(list(attributes)):
        attribute = attributes[tag.name]
        value = tag.get(attribute)
        if not value or not value.strip():
            continue
        absolute_url = urljoin(base_url, value.strip())
        if not is_same_origin(absolute_url, base_url):
            logger.debug("Skipping external resource %s", absolute_url)
            continue
        yield AssetReference(
            source_url=absolute_url,
            tag_name=tag.name,
            attribute_name=attribute,
            element=tag,
        )
