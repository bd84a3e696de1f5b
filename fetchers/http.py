"""httpx wrapper with the retry/backoff policy used by every acquisition client."""

import logging
import time
from typing import Callable, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60
BACKOFF_SECONDS = 2


def parse_retry_after(value: Optional[str]) -> int:
    """Seconds to wait after a 429. Only the delta-seconds form is honored."""
    try:
        return int(value) if value else DEFAULT_RETRY_AFTER_SECONDS
    except ValueError:
        return DEFAULT_RETRY_AFTER_SECONDS


class RetryingClient:
    def __init__(
        self,
        retries: int = 3,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.retries = retries
        self.timeout = timeout
        self.client = client or httpx.Client(follow_redirects=True)
        self.sleep = sleep

    def request(self, method: str, url: str, **kwargs) -> Optional[httpx.Response]:
        """Send a request, retrying rate limits, server errors and network failures.

        Returns the first successful response, or None once every attempt
        came back with an error status. A network error on the last
        attempt is re-raised.
        """
        for attempt in range(1, self.retries + 1):
            try:
                response = self.client.request(method, url, timeout=self.timeout, **kwargs)
            except httpx.RequestError as e:
                logger.error(f"Attempt {attempt} failed for {url}: {e}")
                if attempt == self.retries:
                    raise
                self.sleep(BACKOFF_SECONDS * attempt)
                continue

            if response.is_success:
                return response

            if response.status_code == 429:
                wait = parse_retry_after(response.headers.get("Retry-After"))
                logger.warning(f"Rate limited by {url}, waiting {wait}s...")
                self.sleep(wait)
                continue

            logger.warning(
                f"Attempt {attempt} for {url} failed with status {response.status_code}"
            )
            self.sleep(BACKOFF_SECONDS * attempt)

        return None

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "RetryingClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
