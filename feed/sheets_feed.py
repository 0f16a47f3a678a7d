"""HTTP client for the spreadsheet meeting feed."""
import logging
import time
from typing import Any, Dict

import requests

logger = logging.getLogger(__name__)


class SheetsFeedClient:
    """Fetches the published spreadsheet feed as decoded JSON."""

    MAX_RETRIES = 3
    BASE_DELAY = 1  # seconds

    def __init__(self, feed_url: str, timeout: int = 30):
        """
        Initialize the feed client.

        Args:
            feed_url: URL of the JSON feed
            timeout: HTTP request timeout in seconds (default: 30)
        """
        self.feed_url = feed_url
        self.timeout = timeout

    def fetch_feed(self) -> Dict[str, Any]:
        """
        Fetch and decode the feed, retrying with exponential backoff.

        Returns:
            Decoded feed document

        Raises:
            requests.RequestException: If all retry attempts fail
            ValueError: If the response body is not JSON
        """
        for attempt in range(self.MAX_RETRIES):
            try:
                logger.info(
                    f"Fetching meeting feed (attempt {attempt + 1}/{self.MAX_RETRIES})"
                )
                response = requests.get(self.feed_url, timeout=self.timeout)
                response.raise_for_status()
                break

            except requests.RequestException as e:
                if attempt < self.MAX_RETRIES - 1:
                    delay = self.BASE_DELAY * (2 ** attempt)
                    logger.warning(
                        f"Request failed (attempt {attempt + 1}/{self.MAX_RETRIES}): {e}. "
                        f"Retrying in {delay} seconds..."
                    )
                    time.sleep(delay)
                else:
                    logger.error(
                        f"All {self.MAX_RETRIES} retry attempts failed. Last error: {e}"
                    )
                    raise

        try:
            feed = response.json()
        except ValueError as e:
            logger.error(f"Feed response is not valid JSON: {e}")
            raise ValueError(f"Feed at {self.feed_url} is not valid JSON") from e

        logger.info(f"Fetched meeting feed ({len(response.content)} bytes)")
        return feed
