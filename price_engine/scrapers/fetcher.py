"""Page fetcher: the only I/O the comparison core performs."""
from typing import Dict, Optional, Protocol
import logging
import random

import httpx

from price_engine.core.config import Settings, get_settings
from price_engine.core.exceptions import TransientFetchError

logger = logging.getLogger(__name__)

BASE_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


class Fetcher(Protocol):
    async def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        ...


class PageFetcher:
    """Fetches raw page markup over HTTP with a rotated User-Agent.

    When a ScraperAPI key is configured the request goes through the
    ScraperAPI endpoint instead of straight to the site.
    """

    def __init__(self, settings: Settings = None, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings or get_settings()
        self.transport = transport

    def build_headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = dict(BASE_HEADERS)
        headers["User-Agent"] = random.choice(self.settings.user_agents)
        if extra:
            headers.update(extra)
        return headers

    def _request_target(self, url: str) -> tuple:
        if self.settings.scraper_api_key:
            params = {"api_key": self.settings.scraper_api_key, "url": url, "keep_headers": "true"}
            return self.settings.scraper_api_base_url, params
        return url, None

    async def fetch(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """Return the page body for ``url``.

        Raises:
            TransientFetchError: on network errors, timeouts and non-2xx responses.
        """
        target, params = self._request_target(url)
        logger.info(f"Fetching URL: {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.fetch_timeout_seconds,
                follow_redirects=True,
                verify=self.settings.verify_ssl,
                transport=self.transport,
            ) as client:
                response = await client.get(target, params=params, headers=self.build_headers(headers))
        except httpx.TimeoutException as e:
            raise TransientFetchError(url, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransientFetchError(url, str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise TransientFetchError(url, f"HTTP {response.status_code}", status_code=response.status_code)

        return response.text
