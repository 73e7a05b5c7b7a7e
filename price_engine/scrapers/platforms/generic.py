from typing import Dict

from ..base import BasePlatformExtractor

class GenericExtractor(BasePlatformExtractor):
    """Fallback extractor for platforms without dedicated selectors."""

    platform_name = "Unknown"
    availability = "Available"

    title_selectors = (
        "h1",
        "[data-testid='product-title']",
        ".product-title",
        ".product-name",
        "h1.title",
        ".main-title",
    )
    price_selectors = (
        ".price",
        ".product-price",
        "[data-testid='price']",
        ".current-price",
        ".final-price",
        ".selling-price",
        ".offer-price",
        ".discounted-price",
        ".price-current",
        ".price-now",
        ".sale-price",
        "[itemprop='price']::attr(content)",
    )
    list_price_selectors = (
        ".original-price",
        ".mrp",
        ".price-original",
        ".was-price",
        ".list-price",
        ".regular-price",
        ".crossed-price",
        ".strike-price",
    )
    rating_selectors = (
        "[itemprop='ratingValue']",
        ".rating",
    )
    review_count_selectors = (
        "[itemprop='reviewCount']",
        ".review-count",
    )
    feature_selectors = (
        ".product-features li",
        ".features li",
    )
    min_feature_length = 5

    def __init__(self, platform_name: str = None):
        if platform_name:
            self.platform_name = platform_name
        super().__init__()

    def get_scraper_config(self) -> Dict:
        """Generic fetch configuration."""
        return {
            "headers": {
                "Accept-Language": "en-US,en;q=0.5",
            }
        }
