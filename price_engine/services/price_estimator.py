"""Deterministic, category-aware synthetic prices.

Used as the fallback of last resort when extraction fails or yields an
implausible value. The same product name always estimates to the same
price, across calls and across process restarts.
"""
import logging
import math

from price_engine.core.categories import (
    DEFAULT_ESTIMATION_RANGE,
    CategoryClassifier,
    CategoryRange,
    estimation_classifier,
)
from price_engine.schemas.models import ExtractedPrice, Provenance

logger = logging.getLogger(__name__)


def stable_hash(text: str) -> int:
    """31-multiplier rolling string hash, wrapped to a signed 32-bit int, then abs.

    Python's built-in ``hash`` is salted per process and cannot be used here.
    """
    value = 0
    for char in text:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value)


def seeded_unit(seed: int) -> float:
    """Map a seed to [0, 1) with the fractional part of sin(seed) * 10000."""
    scaled = math.sin(seed) * 10000
    unit = abs(scaled - math.floor(scaled))
    # floor() keeps this under 1.0 except for float rounding at the boundary
    return unit if unit < 1.0 else 0.0


class PriceEstimator:
    """Estimates a price for a product name from its inferred category range."""

    def __init__(self, classifier: CategoryClassifier = estimation_classifier,
                 default_range: CategoryRange = DEFAULT_ESTIMATION_RANGE):
        self.classifier = classifier
        self.default_range = default_range

    def category_range(self, product_name: str) -> CategoryRange:
        return self.classifier.classify(product_name) or self.default_range

    def estimate(self, product_name: str) -> ExtractedPrice:
        price_range = self.category_range(product_name)
        unit = seeded_unit(stable_hash(product_name or ""))
        span = price_range.max - price_range.min + 1
        amount = min(math.floor(unit * span) + price_range.min, price_range.max)

        logger.info(
            f"Estimated price {amount} for '{product_name}' "
            f"(type: {price_range.keyword}, range: {price_range.min:.0f} - {price_range.max:.0f})"
        )
        return ExtractedPrice(amount=float(amount), provenance=Provenance.ESTIMATED)


_default_estimator = PriceEstimator()


def estimate(product_name: str) -> ExtractedPrice:
    """Estimate a price for ``product_name`` with the default tables."""
    return _default_estimator.estimate(product_name)
