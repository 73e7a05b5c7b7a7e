"""Platform-specific extractor implementations."""

from .amazon import AmazonExtractor
from .flipkart import FlipkartExtractor
from .myntra import MyntraExtractor
from .generic import GenericExtractor
from .marketplaces import (
    AjioExtractor,
    CromaExtractor,
    NykaaExtractor,
    PurplleExtractor,
    RelianceDigitalExtractor,
)

__all__ = [
    'AmazonExtractor',
    'FlipkartExtractor',
    'MyntraExtractor',
    'GenericExtractor',
    'NykaaExtractor',
    'AjioExtractor',
    'CromaExtractor',
    'RelianceDigitalExtractor',
    'PurplleExtractor',
]
