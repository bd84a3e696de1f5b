"""Jina Reader client: fetches a page as markdown."""

import logging
from typing import Optional

from exceptions.custom import FetchError
from fetchers.http import RetryingClient

logger = logging.getLogger(__name__)

JINA_READER_URL = "https://r.jina.ai/"


class JinaReader:
    def __init__(self, api_key: str, http: RetryingClient):
        if not api_key:
            raise FetchError("JINA_API_KEY is not set")
        self.http = http
        self.headers = {
            "Authorization": f"Bearer {api_key}",
            "X-Return-Format": "markdown",
        }

    def extract(self, url: str) -> Optional[str]:
        logger.info(f"Extracting: {url}")
        response = self.http.request("GET", f"{JINA_READER_URL}{url}", headers=self.headers)
        if response is None:
            return None
        return response.text
