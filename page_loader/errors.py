"""Exceptions raised while loading a page."""

from __future__ import annotations

from typing import Optional


class PageLoaderError(Exception):
    """Base exception for every failure of a page load."""


class InvalidURLError(PageLoaderError, ValueError):
    """Raised when the page URL is not an absolute http(s) URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Invalid page URL {url!r}: expected an absolute http(s) URL")


class TransportError(PageLoaderError):
    """The request never produced a response (DNS, refused connection, timeout)."""

    def __init__(self, url: str, reason: Optional[str] = None) -> None:
        self.url = url
        self.reason = reason
        super().__init__(
            f"The request was made at {url} but no response was received"
        )


class HTTPStatusError(PageLoaderError):
    """A response arrived with a 4xx or 5xx status code."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(f"'{url}' request failed with status code {status_code}")


class FilesystemError(PageLoaderError):
    """Creating a directory or writing a file failed.

    The message is the operating system's own text, so callers see exactly
    what ``mkdir`` or ``open`` reported along with the offending path.
    """

    def __init__(self, path: str, operation: str, error: OSError) -> None:
        self.path = path
        self.operation = operation
        self.errno = error.errno
        self.strerror = error.strerror
        super().__init__(str(error))
