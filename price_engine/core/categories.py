"""Static category price tables and keyword category inference.

The tables are module-level tuples of frozen entries, loaded once at import
and never written afterwards. Order matters: inference is first-match-wins
in table order.
"""
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple

# Absolute plausibility bounds, independent of category
ABSOLUTE_MIN_PRICE = 10.0
ABSOLUTE_MAX_PRICE = 500000.0


@dataclass(frozen=True)
class CategoryRange:
    """Price bounds for one category keyword, in the working currency."""
    keyword: str
    min: float
    max: float
    typical_min: float
    typical_max: float

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max

    def is_typical(self, price: float) -> bool:
        return self.typical_min <= price <= self.typical_max

    def clamp_typical(self, price: float) -> float:
        return min(max(price, self.typical_min), self.typical_max)


def _range(keyword: str, min_price: float, max_price: float,
           typical_min: float = None, typical_max: float = None) -> CategoryRange:
    return CategoryRange(
        keyword=keyword,
        min=min_price,
        max=max_price,
        typical_min=min_price if typical_min is None else typical_min,
        typical_max=max_price if typical_max is None else typical_max,
    )


# Plausibility ranges used to validate extracted prices.
# "smartphone", "headphone" and "earphone" are shadowed by "phone", and "t-shirt" by "shirt".
VALIDATION_RANGES: Tuple[CategoryRange, ...] = (
    _range("phone", 3000, 200000, 8000, 80000),
    _range("smartphone", 3000, 200000, 8000, 80000),
    _range("laptop", 15000, 300000, 25000, 120000),
    _range("tablet", 5000, 150000, 10000, 60000),
    _range("headphone", 200, 100000, 1000, 25000),
    _range("earphone", 100, 50000, 500, 10000),

    _range("shirt", 150, 15000, 400, 4000),
    _range("t-shirt", 100, 10000, 300, 2500),
    _range("jeans", 400, 20000, 800, 6000),
    _range("shoes", 500, 50000, 1000, 12000),

    _range("cream", 50, 10000, 200, 2500),
    _range("perfume", 200, 30000, 800, 8000),
    _range("makeup", 100, 15000, 300, 4000),
)

# Ranges the estimator draws synthetic prices from
ESTIMATION_RANGES: Tuple[CategoryRange, ...] = (
    # Electronics; "smartphone", "headphone" and "earphone" are shadowed by "phone"
    _range("phone", 8000, 100000),
    _range("smartphone", 8000, 100000),
    _range("laptop", 25000, 150000),
    _range("tablet", 10000, 80000),
    _range("headphone", 1000, 50000),
    _range("earphone", 500, 15000),
    _range("tv", 15000, 200000),
    _range("camera", 10000, 200000),

    # Fashion
    _range("shirt", 400, 5000),
    _range("t-shirt", 300, 3000),
    _range("dress", 600, 10000),
    _range("jeans", 800, 8000),
    _range("shoes", 1000, 15000),
    _range("sneaker", 1500, 12000),

    # Beauty & personal care
    _range("cream", 200, 3000),
    _range("perfume", 800, 8000),
    _range("sunscreen", 200, 1500),
    _range("shampoo", 150, 2000),
    _range("makeup", 300, 5000),

    # Home & kitchen
    _range("microwave", 5000, 40000),
    _range("refrigerator", 15000, 100000),
    _range("washing", 12000, 80000),

    # Books & media
    _range("book", 100, 2000),
)

DEFAULT_ESTIMATION_RANGE = _range("default", 500, 10000)

# Broad product groups, used to pick which extra platforms to compare against
PRODUCT_GROUPS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("electronics", ("phone", "mobile", "smartphone", "laptop", "tablet", "tv",
                     "refrigerator", "headphone")),
    ("fashion", ("shirt", "jeans", "shoe", "dress", "sneaker")),
    ("beauty", ("sunscreen", "cream", "spf", "moisturizer", "makeup")),
)


class CategoryClassifier(Protocol):
    """Maps a free-text product name to a category range, or None."""

    def classify(self, product_name: str) -> Optional[CategoryRange]:
        ...


class KeywordCategoryClassifier:
    """First-match-wins substring classifier over an ordered range table.

    A name matching several keywords only honors the first one in table
    order; there is no scoring across matches.
    """

    def __init__(self, ranges: Sequence[CategoryRange]):
        self._ranges = tuple(ranges)

    @property
    def ranges(self) -> Tuple[CategoryRange, ...]:
        return self._ranges

    def classify(self, product_name: str) -> Optional[CategoryRange]:
        name = (product_name or "").lower()
        for category_range in self._ranges:
            if category_range.keyword in name:
                return category_range
        return None


def product_group(product_name: str) -> str:
    """Return 'electronics', 'fashion', 'beauty' or 'general' for a product name."""
    name = (product_name or "").lower()
    for group, keywords in PRODUCT_GROUPS:
        if any(keyword in name for keyword in keywords):
            return group
    return "general"


validation_classifier = KeywordCategoryClassifier(VALIDATION_RANGES)
estimation_classifier = KeywordCategoryClassifier(ESTIMATION_RANGES)
