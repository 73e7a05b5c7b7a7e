from .models import (
    AnalyzeRequest,
    ComparisonResult,
    Discount,
    ExtractedPrice,
    PriceRecord,
    ProductQuery,
    Provenance,
    ValidationResult,
)

__all__ = [
    'AnalyzeRequest',
    'ComparisonResult',
    'Discount',
    'ExtractedPrice',
    'PriceRecord',
    'ProductQuery',
    'Provenance',
    'ValidationResult',
]
