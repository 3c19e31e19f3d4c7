from __future__ import annotations

import logging
from typing import Sequence
from urllib.parse import quote

import requests

from npm_connector.config import NPM_DOWNLOADS_BASE_URL, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


class NpmDownloadsClient:
    base_url = NPM_DOWNLOADS_BASE_URL

    def __init__(self, timeout_seconds: int = REQUEST_TIMEOUT_SECONDS):
        self.timeout_seconds = timeout_seconds

    def range_url(self, packages: Sequence[str], start_date: str, end_date: str) -> str:
        encoded_packages = quote(",".join(packages), safe="@/,")
        date_range = f"{start_date}:{end_date}"
        return f"{self.base_url}/{date_range}/{encoded_packages}"

    def fetch_range(
        self, packages: Sequence[str], start_date: str, end_date: str
    ) -> str:
        url = self.range_url(packages, start_date, end_date)
        logger.debug("fetching npm downloads url=%s", url)

        response = requests.get(url, timeout=self.timeout_seconds)
        response.raise_for_status()
        return response.text
