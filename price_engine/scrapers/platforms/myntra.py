from typing import Dict

from ..base import BasePlatformExtractor

class MyntraExtractor(BasePlatformExtractor):
    """Extractor for Myntra product pages."""

    platform_name = "Myntra"
    url_pattern = r"myntra\."
    search_url_template = "https://www.myntra.com/{terms}"
    base_url = "https://www.myntra.com"

    title_selectors = (
        "h1.pdp-name",
        "h1.pdp-title",
        "h1",
    )
    price_selectors = (
        ".pdp-price strong",
        ".pdp-discount-container .pdp-price",
        ".pdp-price",
    )
    list_price_selectors = (
        ".pdp-mrp s",
        ".pdp-mrp",
    )
    rating_selectors = (
        ".index-overallRating div",
        ".index-overallRating",
    )
    review_count_selectors = (
        ".index-ratingsCount",
    )
    feature_selectors = (
        ".pdp-product-description-content li",
        ".index-tableContainer .index-row",
    )
    min_feature_length = 5

    search_result_selectors = (
        "li.product-base",
    )
    search_title_selectors = (
        ".product-product",
        ".product-brand",
    )
    search_price_selectors = (
        ".product-discountedPrice",
        ".product-price span",
    )
    search_link_selectors = (
        "a::attr(href)",
    )

    def get_scraper_config(self) -> Dict:
        """Get Myntra-specific fetch configuration."""
        return {
            "headers": {
                "Accept-Language": "en-IN,en;q=0.9",
            }
        }
