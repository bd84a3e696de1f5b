"""Serper (Google Search API) client for hotel discovery."""

import logging

from exceptions.custom import FetchError
from fetchers.http import RetryingClient

logger = logging.getLogger(__name__)

SERPER_SEARCH_URL = "https://google.serper.dev/search"
RESULTS_PER_QUERY = 15


def build_search_query(neighborhood: str) -> str:
    return f"best hotels in {neighborhood} athens greece"


class SerperClient:
    def __init__(self, api_key: str, http: RetryingClient):
        if not api_key:
            raise FetchError("SERPER_API_KEY is not set")
        self.http = http
        self.headers = {
            "X-API-KEY": api_key,
            "Content-Type": "application/json",
        }

    def search_hotels(self, neighborhood: str) -> list[dict]:
        """Organic search results (title, link, snippet...) for a neighborhood."""
        query = build_search_query(neighborhood)
        logger.info(f"Searching: {query}")

        response = self.http.request(
            "POST",
            SERPER_SEARCH_URL,
            headers=self.headers,
            json={"q": query, "num": RESULTS_PER_QUERY},
        )
        if response is None:
            return []
        return response.json().get("organic", [])
