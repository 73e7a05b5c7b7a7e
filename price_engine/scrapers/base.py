"""Base platform extractor implementation."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple, TypeVar
from urllib.parse import quote, urljoin
import logging
import re

from parsel import Selector

from price_engine.core.config import get_settings
from price_engine.schemas.models import ExtractedPrice
from price_engine.services.price_normalizer import normalize

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATING_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*out of", re.IGNORECASE)
BARE_RATING_PATTERN = re.compile(r"^\s*(\d(?:\.\d+)?)\s*★?\s*$")
REVIEW_COUNT_PATTERN = re.compile(r"(\d[\d,]*)\s*(?:global\s+)?(?:ratings?|reviews?)", re.IGNORECASE)


@dataclass(frozen=True)
class ExtractedProduct:
    """What an extractor recovered from one page, before validation."""
    platform: str
    name: str
    price: ExtractedPrice
    url: Optional[str] = None
    list_price: Optional[ExtractedPrice] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    delivery_estimate: Optional[str] = None
    availability: str = "In Stock"
    features: List[str] = field(default_factory=list)


def first_non_empty(candidates: Iterable[T], extract: Callable[[T], Optional[object]]):
    """Return the first truthy ``extract(candidate)`` in order, or None."""
    for candidate in candidates:
        value = extract(candidate)
        if value:
            return value
    return None


def clean_text(text: Optional[str]) -> str:
    if not text:
        return ""
    return " ".join(text.split()).strip()


def select_text(selector: Selector, css: str) -> str:
    """Whitespace-normalized text of the first node matching ``css``."""
    if "::" in css:
        return clean_text(selector.css(css).get())
    nodes = selector.css(css)
    if not nodes:
        return ""
    return clean_text(nodes[0].xpath("string()").get())


def parse_rating(text: str) -> Optional[float]:
    if not text:
        return None
    match = RATING_PATTERN.search(text) or BARE_RATING_PATTERN.match(text)
    if not match:
        return None
    rating = float(match.group(1))
    return rating if 0.0 <= rating <= 5.0 else None


def parse_review_count(text: str) -> Optional[int]:
    if not text:
        return None
    match = REVIEW_COUNT_PATTERN.search(text)
    return int(match.group(1).replace(",", "")) if match else None


class BasePlatformExtractor(ABC):
    """Base class for all platform-specific extractors.

    Subclasses declare ordered selector lists, most specific first. Every
    field is read with the same first-match-wins policy, so markup drift
    across page variants only needs another selector appended.
    """

    # Platform name and URL pattern - must be set in subclasses
    platform_name: str = ""
    url_pattern: str = ""
    search_url_template: Optional[str] = None
    base_url: str = ""

    title_selectors: Tuple[str, ...] = ()
    price_selectors: Tuple[str, ...] = ()
    list_price_selectors: Tuple[str, ...] = ()
    rating_selectors: Tuple[str, ...] = ()
    review_count_selectors: Tuple[str, ...] = ()
    delivery_selectors: Tuple[str, ...] = ()
    feature_selectors: Tuple[str, ...] = ()
    min_feature_length: int = 10
    availability: str = "In Stock"

    # First result card on a search page
    search_result_selectors: Tuple[str, ...] = ()
    search_title_selectors: Tuple[str, ...] = ()
    search_price_selectors: Tuple[str, ...] = ()
    search_link_selectors: Tuple[str, ...] = ()

    def __init__(self):
        if not self.platform_name:
            raise ValueError("Extractor must define platform_name")
        self.settings = get_settings()

    @classmethod
    def can_handle_url(cls, url: str) -> bool:
        return bool(cls.url_pattern) and re.search(cls.url_pattern, url.lower()) is not None

    @abstractmethod
    def get_scraper_config(self) -> Dict:
        """
        Return fetch configuration for the specific platform.
        Must be implemented by child classes.

        Returns:
            Dict: extra request headers under "headers"
        """
        pass

    def build_search_url(self, search_terms: str) -> Optional[str]:
        if not self.search_url_template:
            return None
        return self.search_url_template.format(terms=quote(search_terms))

    # Field extraction

    def extract_name(self, selector: Selector) -> Optional[str]:
        name = first_non_empty(self.title_selectors, lambda css: select_text(selector, css))
        return name[:self.settings.max_name_length] if name else None

    def extract_price(self, selector: Selector) -> Optional[ExtractedPrice]:
        def price_at(css: str) -> Optional[ExtractedPrice]:
            text = select_text(selector, css)
            logger.debug(f"  Trying: '{css}' -> '{text}'")
            price = normalize(text)
            if price:
                logger.info(f"  Found selling price {price.amount} using selector '{css}'")
            return price

        price = first_non_empty(self.price_selectors, price_at)
        if not price:
            logger.debug(f"  No selling price found with any {self.platform_name} selector")
        return price

    def extract_list_price(self, selector: Selector, selling_price: ExtractedPrice) -> Optional[ExtractedPrice]:
        def list_price_at(css: str) -> Optional[ExtractedPrice]:
            price = normalize(select_text(selector, css))
            if price and price.amount > selling_price.amount:
                logger.info(f"  Found MRP {price.amount} using selector '{css}'")
                return price
            if price:
                logger.debug(f"  Found {price.amount} with '{css}' but it's not above the selling price")
            return None

        return first_non_empty(self.list_price_selectors, list_price_at)

    def extract_rating(self, selector: Selector) -> Optional[float]:
        return first_non_empty(self.rating_selectors, lambda css: parse_rating(select_text(selector, css)))

    def extract_review_count(self, selector: Selector) -> Optional[int]:
        return first_non_empty(
            self.review_count_selectors,
            lambda css: parse_review_count(select_text(selector, css)),
        )

    def extract_delivery(self, selector: Selector) -> Optional[str]:
        return first_non_empty(self.delivery_selectors, lambda css: select_text(selector, css)) or None

    def extract_features(self, selector: Selector) -> List[str]:
        def features_at(css: str) -> List[str]:
            texts = (clean_text(node.xpath("string()").get()) for node in selector.css(css))
            return [text for text in texts if len(text) > self.min_feature_length]

        features = first_non_empty(self.feature_selectors, features_at) or []
        return features[:self.settings.max_features]

    def extract(self, markup: str, url: str = None) -> Optional[ExtractedProduct]:
        """Extract a product from a product page.

        Returns None unless both a name and a positive price were found.
        """
        if not markup:
            return None

        selector = Selector(text=markup)
        logger.debug(f"{self.platform_name} price extraction: trying multiple selectors...")

        name = self.extract_name(selector)
        if not name:
            logger.info(f"No product name found on {self.platform_name} page")
            return None

        price = self.extract_price(selector)
        if not price:
            logger.info(f"No selling price found on {self.platform_name} page for '{name}'")
            return None

        return ExtractedProduct(
            platform=self.platform_name,
            name=name,
            price=price,
            url=url,
            list_price=self.extract_list_price(selector, price),
            rating=self.extract_rating(selector),
            review_count=self.extract_review_count(selector),
            delivery_estimate=self.extract_delivery(selector),
            availability=self.availability,
            features=self.extract_features(selector),
        )

    def extract_search_result(self, markup: str, search_url: str = None) -> Optional[ExtractedProduct]:
        """Extract the first result card of a search results page."""
        if not markup or not self.search_result_selectors:
            return None

        page = Selector(text=markup)
        card = first_non_empty(self.search_result_selectors, lambda css: page.css(css)[:1])
        if not card:
            logger.info(f"No search results found on {self.platform_name}")
            return None
        card = card[0]

        name = first_non_empty(self.search_title_selectors, lambda css: select_text(card, css))
        price = first_non_empty(self.search_price_selectors, lambda css: normalize(select_text(card, css)))
        if not name or not price:
            return None

        link = first_non_empty(self.search_link_selectors, lambda css: select_text(card, css))
        return ExtractedProduct(
            platform=self.platform_name,
            name=name[:self.settings.max_name_length],
            price=price,
            url=urljoin(self.base_url, link) if link else search_url,
            availability=self.availability,
        )
