import httpx
import pytest

from price_engine.core.config import Settings
from price_engine.core.exceptions import TransientFetchError
from price_engine.scrapers import PageFetcher


def make_fetcher(handler, **settings):
    return PageFetcher(Settings(**settings), transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_fetch_returns_body_with_rotated_user_agent():
    seen = {}

    def handler(request):
        seen["headers"] = request.headers
        return httpx.Response(200, text="<html>ok</html>")

    fetcher = make_fetcher(handler)
    body = await fetcher.fetch("https://www.amazon.in/dp/B0TEST", headers={"Accept-Language": "en-IN"})

    assert body == "<html>ok</html>"
    assert seen["headers"]["User-Agent"] in fetcher.settings.user_agents
    assert seen["headers"]["Accept-Language"] == "en-IN"


@pytest.mark.asyncio
async def test_non_success_status_is_transient():
    fetcher = make_fetcher(lambda request: httpx.Response(503, text="busy"))

    with pytest.raises(TransientFetchError) as exc_info:
        await fetcher.fetch("https://www.flipkart.com/p/1")
    assert exc_info.value.status_code == 503
    assert exc_info.value.url == "https://www.flipkart.com/p/1"


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ReadTimeout])
async def test_network_errors_are_transient(error):
    def handler(request):
        raise error("boom", request=request)

    with pytest.raises(TransientFetchError):
        await make_fetcher(handler).fetch("https://www.myntra.com/x")


@pytest.mark.asyncio
async def test_scraper_api_routing():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, text="proxied")

    fetcher = make_fetcher(handler, scraper_api_key="secret", scraper_api_base_url="http://api.scraperapi.com")
    assert await fetcher.fetch("https://www.amazon.in/dp/B0TEST") == "proxied"

    assert seen["url"].host == "api.scraperapi.com"
    assert seen["url"].params["api_key"] == "secret"
    assert seen["url"].params["url"] == "https://www.amazon.in/dp/B0TEST"
