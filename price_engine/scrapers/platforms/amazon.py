from typing import Dict
import logging

from ..base import BasePlatformExtractor

logger = logging.getLogger(__name__)

class AmazonExtractor(BasePlatformExtractor):
    """Extractor for Amazon India product and search pages."""

    platform_name = "Amazon"
    url_pattern = r"amazon\.|amzn\."
    search_url_template = "https://www.amazon.in/s?k={terms}&ref=nb_sb_noss"
    base_url = "https://www.amazon.in"

    title_selectors = (
        "#productTitle",
        "h1.a-size-large span",
        "h1 span",
    )
    price_selectors = (
        # Most common current price selectors
        ".a-price.a-text-price.a-size-medium.apexPriceToPay .a-offscreen",
        ".a-price-range .a-offscreen",
        ".a-price .a-offscreen",
        ".a-price-whole",
        "span.a-price.a-text-price.a-size-medium.apexPriceToPay span.a-offscreen",
        # Alternative price selectors
        ".a-color-price.a-size-medium",
        "#priceblock_dealprice",
        "#priceblock_ourprice",
        ".a-price.a-text-price .a-offscreen",
        # Deal price selectors
        ".a-price.a-text-price.a-size-base .a-offscreen",
        ".a-section .a-price .a-offscreen",
        # Fallback selectors
        "span.a-price-symbol + span.a-price-whole",
        ".a-price-current .a-offscreen",
        "[data-asin-price] .a-offscreen",
        ".a-box .a-price .a-offscreen",
    )
    list_price_selectors = (
        ".a-price.a-text-price .a-offscreen",
        "span.a-price.a-text-price span.a-offscreen",
        ".a-text-strike .a-offscreen",
        ".a-text-price.a-size-base .a-offscreen",
        # List price
        "#listPrice .a-offscreen",
        ".a-price.a-text-price.a-size-base.a-color-secondary .a-offscreen",
        # Strike-through price
        ".a-price.a-text-price.a-size-small .a-offscreen",
        ".a-text-strike",
        "[data-a-color='secondary'] .a-offscreen",
        ".a-row .a-price.a-text-price .a-offscreen",
    )
    rating_selectors = (
        "#acrPopover .a-icon-alt",
        ".a-icon-alt",
    )
    review_count_selectors = (
        "#acrCustomerReviewText",
    )
    delivery_selectors = (
        "#mir-layout-DELIVERY_BLOCK-slot-PRIMARY_DELIVERY_MESSAGE_LARGE span[data-csa-c-delivery-time]",
        "#deliveryBlockMessage .a-text-bold",
    )
    feature_selectors = (
        "#feature-bullets ul li span",
    )
    min_feature_length = 10

    search_result_selectors = (
        "[data-component-type='s-search-result']",
    )
    search_title_selectors = (
        "h2 a span",
        "h2 span",
    )
    search_price_selectors = (
        ".a-price .a-offscreen",
        ".a-price-whole",
    )
    search_link_selectors = (
        "h2 a::attr(href)",
        "a.a-link-normal::attr(href)",
    )

    def get_scraper_config(self) -> Dict:
        """Get Amazon-specific fetch configuration."""
        return {
            "headers": {
                "Accept-Language": "en-IN,en;q=0.9",
            }
        }
