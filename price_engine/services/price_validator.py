"""Plausibility checks for extracted prices."""
import logging

from price_engine.core.categories import (
    ABSOLUTE_MAX_PRICE,
    ABSOLUTE_MIN_PRICE,
    CategoryClassifier,
    validation_classifier,
)
from price_engine.core.exceptions import ImplausiblePrice
from price_engine.schemas.models import ValidationResult
from price_engine.services.price_estimator import PriceEstimator

logger = logging.getLogger(__name__)


class PriceValidator:
    """Checks a price against absolute bounds and the inferred category range.

    Invalid prices come back with a suggestion: the price clamped into the
    category's typical band, or an estimate when no category matched.
    """

    def __init__(self, classifier: CategoryClassifier = validation_classifier,
                 estimator: PriceEstimator = None,
                 min_price: float = ABSOLUTE_MIN_PRICE,
                 max_price: float = ABSOLUTE_MAX_PRICE):
        self.classifier = classifier
        self.estimator = estimator or PriceEstimator()
        self.min_price = min_price
        self.max_price = max_price

    def validate(self, price: float, product_name: str, platform: str) -> ValidationResult:
        category = self.classifier.classify(product_name)

        if price < self.min_price or price > self.max_price:
            reason = (
                f"Suspicious {'low' if price < self.min_price else 'high'} price {price} "
                f"for '{product_name}' on {platform}"
            )
            if category:
                suggestion = category.clamp_typical(price)
            else:
                suggestion = self.estimator.estimate(product_name).amount
            return ValidationResult(valid=False, reason=reason, suggestion=suggestion)

        if category is None:
            return ValidationResult(valid=True)

        if not category.contains(price):
            return ValidationResult(
                valid=False,
                reason=(
                    f"{category.keyword} price {price} is outside reasonable range "
                    f"({category.min:.0f} - {category.max:.0f})"
                ),
                suggestion=category.clamp_typical(price),
            )

        if not category.is_typical(price):
            logger.info(
                f"{category.keyword} price {price} on {platform} is outside typical range "
                f"({category.typical_min:.0f} - {category.typical_max:.0f}) but still acceptable"
            )

        return ValidationResult(valid=True)

    def ensure_plausible(self, price: float, product_name: str, platform: str) -> float:
        """Return ``price`` unchanged or raise ImplausiblePrice carrying the suggestion."""
        result = self.validate(price, product_name, platform)
        if not result.valid:
            raise ImplausiblePrice(price, result.reason, result.suggestion)
        return price


_default_validator = PriceValidator()


def validate(price: float, product_name: str, platform: str) -> ValidationResult:
    """Validate ``price`` with the default tables and bounds."""
    return _default_validator.validate(price, product_name, platform)
