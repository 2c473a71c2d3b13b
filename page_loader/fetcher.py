"""HTTP access for the page and its assets."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import FetchConfig
from .errors import HTTPStatusError, TransportError
from .models import FetchedResource

logger = logging.getLogger("page_loader")


class ResourceFetcher:
    """Fetch URLs over a shared ``requests`` session.

    Every failure is classified into either a :class:`TransportError`, when no
    response came back at all, or an :class:`HTTPStatusError` for 4xx and 5xx
    responses. Redirects are followed by ``requests``; nothing is retried.
    """

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update(self.config.headers_for_session())

    def fetch(self, url: str) -> FetchedResource:
        logger.debug("GET %s", url)
        try:
            response = self.session.get(url, timeout=self.config.timeout)
        except requests.RequestException as exc:
            logger.debug("Request to %s failed: %s", url, exc)
            raise TransportError(url, reason=str(exc)) from exc

        if response.status_code >= 400:
            raise HTTPStatusError(url, response.status_code)

        content_type = response.headers.get("Content-Type", "")
        encoding = response.encoding if "charset=" in content_type.lower() else None
        return FetchedResource(
            url=url,
            content=response.content,
            content_type=content_type,
            encoding=encoding,
        )

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ResourceFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
