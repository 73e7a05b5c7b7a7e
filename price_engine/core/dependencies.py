from price_engine.core.config import get_settings
from price_engine.scrapers import PageFetcher
from price_engine.services.comparison_service import ComparisonService
from price_engine.services.price_estimator import PriceEstimator
from price_engine.services.price_validator import PriceValidator

def get_page_fetcher():
    """Get page fetcher instance"""
    return PageFetcher(get_settings())

def get_comparison_service():
    """Get comparison service instance"""
    estimator = PriceEstimator()
    return ComparisonService(
        fetcher=get_page_fetcher(),
        validator=PriceValidator(estimator=estimator),
        estimator=estimator,
        settings=get_settings(),
    )
