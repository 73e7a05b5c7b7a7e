from typing import Dict
import logging

from ..base import BasePlatformExtractor

logger = logging.getLogger(__name__)

class FlipkartExtractor(BasePlatformExtractor):
    """Extractor for Flipkart product and search pages."""

    platform_name = "Flipkart"
    url_pattern = r"flipkart\."
    search_url_template = "https://www.flipkart.com/search?q={terms}"
    base_url = "https://www.flipkart.com"

    title_selectors = (
        "h1.yhB1nd",
        "h1._35KyD6",
        ".B_NuCI",
        "span.VU-ZEz",
    )
    price_selectors = (
        # Most common Flipkart price selectors
        "._30jeq3._16Jk6d",
        "._1_WHN1",
        ".Nx9bqj.CxhGGd",
        "._30jeq3",
        ".Nx9bqj",
        # Alternative selectors
        "._25b18c",
        "._16Jk6d",
        # Newer selectors
        "[data-testid='price-final']",
        "._4b5DiR",
        "._13fcjj",
        ".CEmiEU",
    )
    list_price_selectors = (
        "._3I9_wc._27UcVY",
        "._3auQ3N._1POkHg",
        "._3I9_wc",
        # Alternative MRP selectors
        "._3auQ3N",
        "._27UcVY",
        ".yRaY8j",
        "._2Tpdn3",
        # Strike-through price
        "[data-testid='price-original']",
        ".CEmiEU._16Jk6d",
    )
    rating_selectors = (
        "._3LWZlK",
        ".XQDdHH",
    )
    review_count_selectors = (
        "._2_R_DZ",
        ".Wphh3N",
    )
    delivery_selectors = (
        "._3XINqE",
        ".hVvnXm",
    )
    feature_selectors = (
        "._21lJbe li",
        "._1mXcCf li",
    )
    min_feature_length = 5

    search_result_selectors = (
        "div[data-id]",
        "._1AtVbE",
    )
    search_title_selectors = (
        "._4rR01T",
        ".KzDlHZ",
        ".wjcEIp",
    )
    search_price_selectors = (
        "._30jeq3",
        ".Nx9bqj",
    )
    search_link_selectors = (
        "a._1fQZEK::attr(href)",
        "a.CGtC98::attr(href)",
        "a::attr(href)",
    )

    def get_scraper_config(self) -> Dict:
        """Get Flipkart-specific fetch configuration."""
        return {
            "headers": {
                "Accept-Language": "en-IN,en;q=0.9",
            }
        }
