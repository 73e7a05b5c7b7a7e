import pytest
import os
import sys
from pathlib import Path

# Add the application root directory to the Python path
root_dir = str(Path(__file__).parent.parent)
sys.path.insert(0, root_dir)

# Set testing environment variables
os.environ["LOG_TO_FILE"] = "false"
os.environ["ENABLE_CROSS_PLATFORM"] = "true"
os.environ.pop("SCRAPER_API_KEY", None)

from price_engine.core.config import get_settings


# Settings are cached; tests that change the environment need a fresh copy
@pytest.fixture(autouse=True)
def reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeFetcher:
    """Serves canned markup per URL substring; anything else fails like a dead site."""

    def __init__(self, pages=None, delays=None):
        self.pages = pages or {}
        self.delays = delays or {}
        self.requested = []

    async def fetch(self, url, headers=None):
        import asyncio
        from price_engine.core.exceptions import TransientFetchError

        self.requested.append(url)
        for fragment, delay in self.delays.items():
            if fragment in url:
                await asyncio.sleep(delay)
        for fragment, markup in self.pages.items():
            if fragment in url:
                return markup
        raise TransientFetchError(url, "connection refused")


@pytest.fixture
def fake_fetcher():
    return FakeFetcher
