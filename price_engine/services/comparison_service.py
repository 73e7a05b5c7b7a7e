"""Cross-platform price comparison.

For each platform: fetch, extract, validate, fall back to an estimate where
any step fails, compute the discount, and build a PriceRecord. Platforms run
concurrently and independently; a failure on one never affects another.
"""
from typing import List, Optional
from urllib.parse import parse_qs, urlparse
import asyncio
import logging
import re

from price_engine.core.categories import product_group
from price_engine.core.config import Settings, get_settings
from price_engine.core.exceptions import (
    ExtractionMiss,
    ImplausiblePrice,
    MalformedInput,
    TransientFetchError,
)
from price_engine.schemas.models import (
    ComparisonResult,
    ExtractedPrice,
    PriceRecord,
    ProductQuery,
    Provenance,
)
from price_engine.scrapers import (
    BasePlatformExtractor,
    ExtractedProduct,
    Fetcher,
    PageFetcher,
    detect_platform,
    get_extractor_for_platform,
)
from price_engine.services.discount_service import discount
from price_engine.services.price_estimator import PriceEstimator
from price_engine.services.price_validator import PriceValidator

logger = logging.getLogger(__name__)

BASE_COMPARISON_PLATFORMS = ("Amazon", "Flipkart")
GROUP_PLATFORMS = {
    "fashion": ("Myntra", "Ajio"),
    "beauty": ("Nykaa", "Purplle"),
    "electronics": ("Croma", "Reliance Digital"),
}

STOP_WORDS = {"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with"}
ESTIMATED_AVAILABILITY = "Check availability"


def looks_like_url(text: str) -> bool:
    parsed = urlparse(text.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def product_name_from_url(url: str) -> str:
    """Best-effort product name from a product URL slug or search query."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return "Product"

    parts = parsed.path.split("/")

    # Amazon: /<slug>/dp/<asin>
    if "dp" in parts:
        dp_index = parts.index("dp")
        if dp_index > 0 and parts[dp_index - 1]:
            return parts[dp_index - 1].replace("-", " ")

    # Flipkart: /<slug>/p/<id>
    if "/p/" in parsed.path and len(parts) > 1 and parts[1]:
        return parts[1].replace("-", " ")

    query = parse_qs(parsed.query)
    for key in ("q", "search", "k"):
        if query.get(key):
            return query[key][0]

    path_parts = [part for part in parts if len(part) > 2]
    if path_parts:
        return path_parts[-1].replace("-", " ")

    return "Product"


def create_search_terms(product_name: str) -> str:
    """First four significant words of a product name."""
    words = re.sub(r"[^\w\s]", " ", product_name.lower()).split()
    return " ".join([word for word in words if len(word) > 2 and word not in STOP_WORDS][:4])


def comparison_platforms(product_name: str, source_platform: Optional[str]) -> List[str]:
    """Platforms to compare against, without the source platform."""
    platforms = list(BASE_COMPARISON_PLATFORMS) + list(GROUP_PLATFORMS.get(product_group(product_name), ()))
    return [platform for platform in platforms if platform != source_platform]


class ComparisonService:
    """Builds a ComparisonResult for a ProductQuery."""

    def __init__(self, fetcher: Fetcher = None, validator: PriceValidator = None,
                 estimator: PriceEstimator = None, settings: Settings = None):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or PageFetcher(self.settings)
        self.estimator = estimator or PriceEstimator()
        self.validator = validator or PriceValidator(estimator=self.estimator)

    async def analyze(self, product_name_or_url: str) -> ComparisonResult:
        """Compare prices for a product name or a product URL.

        Raises:
            MalformedInput: if the input is empty.
        """
        text = (product_name_or_url or "").strip()
        if not text:
            raise MalformedInput("Product name or URL cannot be empty")

        if looks_like_url(text):
            query = ProductQuery(name=product_name_from_url(text), url=text)
        else:
            query = ProductQuery(name=text)
        return await self.compare(query)

    async def compare(self, query: ProductQuery) -> ComparisonResult:
        """Never raises and never returns an empty result."""
        try:
            return await self._compare(query)
        except Exception as e:
            logger.error(f"Comparison failed for '{query.name}', returning estimate only: {e}", exc_info=True)
            platform = detect_platform(query.url) if query.url else BASE_COMPARISON_PLATFORMS[0]
            record = self._estimated_record(platform, query.name, query.url)
            return ComparisonResult(query=query, product_name=query.name, records=[record])

    async def _compare(self, query: ProductQuery) -> ComparisonResult:
        if query.url:
            source_platform = detect_platform(query.url)
            source = await self._source_record(source_platform, query)
        else:
            # Name-only query: the first comparison platform stands in as the source
            source_platform = BASE_COMPARISON_PLATFORMS[0]
            source = await self._search_record(source_platform, query.name)

        product_name = source.product_name
        records = [source]

        if self.settings.enable_cross_platform:
            platforms = comparison_platforms(product_name, source_platform)
            logger.info(f"Cross-platform search for '{product_name}' on: {', '.join(platforms)}")
            others = await asyncio.gather(
                *(self._search_record(platform, product_name) for platform in platforms)
            )
            records.extend(sorted(others, key=lambda record: record.selling_price.amount))

        logger.info(f"Total platforms for comparison: {len(records)} (including source)")
        return ComparisonResult(query=query, product_name=product_name, records=records)

    async def _fetch(self, url: str, extractor: BasePlatformExtractor) -> str:
        headers = extractor.get_scraper_config().get("headers")
        try:
            return await asyncio.wait_for(
                self.fetcher.fetch(url, headers=headers),
                timeout=self.settings.fetch_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            raise TransientFetchError(url, f"no response within {self.settings.fetch_timeout_seconds}s") from e

    async def _source_record(self, platform: str, query: ProductQuery) -> PriceRecord:
        extractor = get_extractor_for_platform(platform)
        try:
            markup = await self._fetch(query.url, extractor)
            product = extractor.extract(markup, query.url)
            if product is None:
                raise ExtractionMiss(platform)
            return self._record_from_product(product)
        except (TransientFetchError, ExtractionMiss) as e:
            logger.warning(f"{platform}: {e}. Using estimate.")
        except Exception as e:
            logger.error(f"Unexpected error processing {platform} for '{query.name}': {e}", exc_info=True)
        return self._estimated_record(platform, query.name, query.url)

    async def _search_record(self, platform: str, product_name: str) -> PriceRecord:
        extractor = get_extractor_for_platform(platform)
        search_url = extractor.build_search_url(create_search_terms(product_name) or product_name)
        try:
            if not search_url:
                raise ExtractionMiss(platform, "no search URL for platform")
            if not extractor.search_result_selectors:
                raise ExtractionMiss(platform, "no search result selectors for platform")
            logger.info(f"Searching {platform}: {search_url}")
            markup = await self._fetch(search_url, extractor)
            product = extractor.extract_search_result(markup, search_url)
            if product is None:
                raise ExtractionMiss(platform, "no search result found")
            return self._record_from_product(product, validation_name=product_name)
        except (TransientFetchError, ExtractionMiss) as e:
            logger.warning(f"{platform}: {e}. Using estimate.")
        except Exception as e:
            logger.error(f"Unexpected error searching {platform} for '{product_name}': {e}", exc_info=True)
        return self._estimated_record(platform, product_name, search_url)

    def _checked_price(self, price: ExtractedPrice, product_name: str, platform: str) -> ExtractedPrice:
        try:
            self.validator.ensure_plausible(price.amount, product_name, platform)
            return price
        except ImplausiblePrice as e:
            if e.suggestion:
                logger.warning(f"{e.reason}. Using suggested price {e.suggestion}")
                return ExtractedPrice(amount=e.suggestion, provenance=Provenance.ESTIMATED)
            logger.warning(f"{e.reason}. Using estimate.")
            return self.estimator.estimate(product_name)

    def _checked_list_price(self, list_price: Optional[ExtractedPrice], selling_price: ExtractedPrice,
                            product_name: str, platform: str) -> Optional[ExtractedPrice]:
        if list_price is None or selling_price.is_estimated or list_price.amount <= selling_price.amount:
            return None
        result = self.validator.validate(list_price.amount, product_name, platform)
        if not result.valid:
            logger.warning(f"Dropping list price: {result.reason}")
            return None
        return list_price

    def _record_from_product(self, product: ExtractedProduct, validation_name: str = None) -> PriceRecord:
        name = validation_name or product.name
        selling_price = self._checked_price(product.price, name, product.platform)
        list_price = self._checked_list_price(product.list_price, selling_price, name, product.platform)
        savings = discount(selling_price.amount, list_price.amount if list_price else None)

        logger.info(f"{product.platform}: selling price {selling_price.amount} ({selling_price.provenance.value})")
        if list_price:
            logger.info(f"{product.platform}: MRP {list_price.amount}, discount {savings.percentage}% ({savings.amount} off)")

        return PriceRecord(
            platform=product.platform,
            product_name=product.name,
            url=product.url,
            selling_price=selling_price,
            list_price=list_price,
            discount_percentage=savings.percentage,
            discount_amount=savings.amount,
            availability=product.availability,
            rating=product.rating,
            review_count=product.review_count,
            delivery_estimate=product.delivery_estimate,
            features=product.features,
        )

    def _estimated_record(self, platform: str, product_name: str, url: Optional[str]) -> PriceRecord:
        return PriceRecord(
            platform=platform,
            product_name=product_name,
            url=url,
            selling_price=self.estimator.estimate(product_name),
            availability=ESTIMATED_AVAILABILITY,
        )


async def analyze(product_name_or_url: str) -> ComparisonResult:
    """Compare prices for a product name or URL with the default collaborators."""
    return await ComparisonService().analyze(product_name_or_url)
