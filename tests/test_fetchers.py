"""Tests for the acquisition clients (HTTP mocked with respx)."""

import json

import httpx
import pytest
import respx
from httpx import Response

from dedup.candidates import CandidateDeduplicator
from exceptions.custom import FetchError
from fetchers.discovery import discover_candidates
from fetchers.http import RetryingClient, parse_retry_after
from fetchers.jina import JINA_READER_URL, JinaReader
from fetchers.serper import SERPER_SEARCH_URL, SerperClient, build_search_query

from conftest import make_neighborhood

PAGE_URL = "https://example.com/athens-hotels"


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def http(sleeps):
    with RetryingClient(retries=3, timeout=5.0, sleep=sleeps.append) as client:
        yield client


class TestParseRetryAfter:
    def test_seconds(self):
        assert parse_retry_after("7") == 7

    def test_missing(self):
        assert parse_retry_after(None) == 60

    def test_http_date_falls_back(self):
        assert parse_retry_after("Wed, 21 Oct 2026 07:28:00 GMT") == 60


class TestRetryingClient:
    @respx.mock
    def test_success_first_try(self, http, sleeps):
        respx.get(PAGE_URL).mock(return_value=Response(200, text="ok"))
        response = http.request("GET", PAGE_URL)
        assert response.text == "ok"
        assert sleeps == []

    @respx.mock
    def test_rate_limit_honors_retry_after(self, http, sleeps):
        respx.get(PAGE_URL).mock(side_effect=[
            Response(429, headers={"Retry-After": "3"}),
            Response(200, text="ok"),
        ])
        response = http.request("GET", PAGE_URL)
        assert response.status_code == 200
        assert sleeps == [3]

    @respx.mock
    def test_server_errors_back_off_then_give_up(self, http, sleeps):
        route = respx.get(PAGE_URL).mock(return_value=Response(500))
        assert http.request("GET", PAGE_URL) is None
        assert route.call_count == 3
        assert sleeps == [2, 4, 6]

    @respx.mock
    def test_network_error_retried(self, http, sleeps):
        respx.get(PAGE_URL).mock(side_effect=[
            httpx.ConnectError("connection refused"),
            Response(200, text="ok"),
        ])
        assert http.request("GET", PAGE_URL).text == "ok"
        assert sleeps == [2]

    @respx.mock
    def test_network_error_on_last_attempt_raises(self, http):
        respx.get(PAGE_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(httpx.ConnectError):
            http.request("GET", PAGE_URL)


class TestSerperClient:
    def test_query(self):
        assert build_search_query("Plaka") == "best hotels in Plaka athens greece"

    def test_missing_key(self, http):
        with pytest.raises(FetchError) as exc_info:
            SerperClient("", http)
        assert exc_info.value.exit_code == 4

    @respx.mock
    def test_search_hotels(self, http):
        route = respx.post(SERPER_SEARCH_URL).mock(
            return_value=Response(200, json={"organic": [{"title": "Top hotels", "link": PAGE_URL}]})
        )
        results = SerperClient("test-key", http).search_hotels("Plaka")
        assert results == [{"title": "Top hotels", "link": PAGE_URL}]
        request = route.calls.last.request
        assert request.headers["X-API-KEY"] == "test-key"
        assert json.loads(request.content) == {"q": "best hotels in Plaka athens greece", "num": 15}

    @respx.mock
    def test_search_failure_returns_empty(self, http):
        respx.post(SERPER_SEARCH_URL).mock(return_value=Response(503))
        assert SerperClient("test-key", http).search_hotels("Plaka") == []


class TestJinaReader:
    def test_missing_key(self, http):
        with pytest.raises(FetchError):
            JinaReader("", http)

    @respx.mock
    def test_extract(self, http):
        route = respx.get(f"{JINA_READER_URL}{PAGE_URL}").mock(
            return_value=Response(200, text="# Hotels\nHotel Grande Bretagne - from €450")
        )
        text = JinaReader("test-key", http).extract(PAGE_URL)
        assert "Grande Bretagne" in text
        assert route.calls.last.request.headers["Authorization"] == "Bearer test-key"

    @respx.mock
    def test_extract_failure(self, http):
        respx.get(f"{JINA_READER_URL}{PAGE_URL}").mock(return_value=Response(404))
        assert JinaReader("test-key", http).extract(PAGE_URL) is None


class TestDiscoverCandidates:
    @respx.mock
    def test_skips_curated_hotels(self, http):
        respx.post(SERPER_SEARCH_URL).mock(
            return_value=Response(200, json={"organic": [{"link": PAGE_URL}, {"title": "no link"}]})
        )
        respx.get(f"{JINA_READER_URL}{PAGE_URL}").mock(
            return_value=Response(
                200,
                text="Hotel Grande Bretagne - from €450\nHotel Phaedra Plaka - from €90",
            )
        )
        hood = make_neighborhood("syntagma", name="Syntagma")
        found = discover_candidates(
            hood,
            SerperClient("k", http),
            JinaReader("k", http),
            CandidateDeduplicator(["Grande Bretagne"]),
        )
        assert [(c.name, c.price_per_night) for c in found] == [("Phaedra Plaka", 90)]
        assert found[0].source_url == PAGE_URL
        assert found[0].neighborhood == "syntagma"
