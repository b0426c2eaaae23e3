"""Client for downloading the mission dataset over HTTP."""
from __future__ import annotations

from typing import Optional

import requests

from spaceviz.config import get_settings


class DatasetFetchError(RuntimeError):
    """Raised when the dataset cannot be downloaded."""


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class DatasetClient:
    """Thin wrapper around requests that applies the configured timeout and handles errors."""

    def __init__(self, timeout: Optional[int] = None) -> None:
        settings = get_settings()
        self.timeout = timeout or settings.request_timeout

    def fetch_text(self, url: str) -> str:
        """Download a text resource, such as the processed mission CSV."""
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DatasetFetchError(f"Dataset request to {url} failed: {exc}") from exc
        if not response.ok:
            raise DatasetFetchError(f"Dataset error {response.status_code}: {response.text[:200]}")
        return response.text
