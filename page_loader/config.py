"""Configuration objects and constants for the page loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_WORKERS = 8


@dataclass
class FetchConfig:
    """HTTP client settings handed to the resource fetcher."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    def headers_for_session(self) -> Dict[str, str]:
        headers = dict(self.headers)
        if self.user_agent:
            headers["User-Agent"] = self.user_agent
        return headers
