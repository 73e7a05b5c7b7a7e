import pytest
from fastapi.testclient import TestClient

from price_engine.core.config import Settings
from price_engine.core.dependencies import get_comparison_service
from price_engine.main import app
from price_engine.services.comparison_service import ComparisonService


@pytest.fixture
def client(fake_fetcher):
    settings = Settings(enable_cross_platform=False)
    app.dependency_overrides[get_comparison_service] = lambda: ComparisonService(
        fetcher=fake_fetcher(), settings=settings
    )
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_get_supported_platforms(client):
    response = client.get("/api/v1/supported-platforms")

    assert response.status_code == 200
    platforms = response.json()
    assert isinstance(platforms, list)
    assert "Amazon" in platforms
    assert "Flipkart" in platforms


def test_analyze_product_name(client):
    response = client.post("/api/v1/analyze", json={"query": "Samsung Galaxy Phone"})

    assert response.status_code == 200
    data = response.json()
    assert data["product_name"] == "Samsung Galaxy Phone"
    assert len(data["records"]) == 1

    record = data["records"][0]
    assert record["platform"] == "Amazon"
    assert record["selling_price"]["provenance"] == "estimated"
    assert 8000 <= record["selling_price"]["amount"] <= 100000


def test_analyze_product_url(client):
    url = "https://www.flipkart.com/samsung-galaxy-s23/p/itm123"
    response = client.post("/api/v1/analyze", json={"query": url})

    assert response.status_code == 200
    data = response.json()
    assert data["query"]["url"] == url
    assert data["records"][0]["platform"] == "Flipkart"
    assert data["records"][0]["url"] == url


def test_analyze_empty_query(client):
    response = client.post("/api/v1/analyze", json={"query": "   "})
    assert response.status_code == 400
    assert "empty" in response.json()["detail"]


def test_analyze_missing_body(client):
    response = client.post("/api/v1/analyze", json={})
    assert response.status_code == 422


def test_unexpected_error_returns_500(client):
    class ExplodingService:
        async def analyze(self, query):
            raise RuntimeError("boom")

    app.dependency_overrides[get_comparison_service] = lambda: ExplodingService()
    response = client.post("/api/v1/analyze", json={"query": "anything"})

    assert response.status_code == 500
    assert response.json() == {"detail": "boom"}
