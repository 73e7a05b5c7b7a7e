"""
Page extraction for the supported e-commerce platforms.
"""
from typing import List, Type
from urllib.parse import urlparse
import logging

from .base import BasePlatformExtractor, ExtractedProduct, first_non_empty
from .fetcher import Fetcher, PageFetcher
from .platforms import (
    AjioExtractor,
    AmazonExtractor,
    CromaExtractor,
    FlipkartExtractor,
    GenericExtractor,
    MyntraExtractor,
    NykaaExtractor,
    PurplleExtractor,
    RelianceDigitalExtractor,
)

logger = logging.getLogger(__name__)

# List of platforms with a known host pattern
AVAILABLE_EXTRACTORS: List[Type[BasePlatformExtractor]] = [
    AmazonExtractor,
    FlipkartExtractor,
    MyntraExtractor,
    NykaaExtractor,
    AjioExtractor,
    CromaExtractor,
    RelianceDigitalExtractor,
    PurplleExtractor,
]

def get_supported_platforms() -> list[str]:
    """Get a list of supported platform names."""
    return sorted(extractor.platform_name for extractor in AVAILABLE_EXTRACTORS)

def host_label(url: str) -> str:
    """Host name without a leading www., used to label unknown platforms."""
    host = urlparse(url).netloc.lower()
    return host[4:] if host.startswith("www.") else (host or GenericExtractor.platform_name)

def detect_platform(url: str) -> str:
    """Platform name for a URL, or its host name if no platform matches."""
    for extractor_class in AVAILABLE_EXTRACTORS:
        if extractor_class.can_handle_url(url):
            return extractor_class.platform_name
    return host_label(url)

def get_extractor_for_platform(platform_name: str) -> BasePlatformExtractor:
    """
    Get the extractor for a platform name.

    Unknown platforms get a GenericExtractor labelled with that name, so
    extraction always has a selector list to try.
    """
    for extractor_class in AVAILABLE_EXTRACTORS:
        if extractor_class.platform_name.lower() == (platform_name or "").lower():
            return extractor_class()

    logger.info(f"No dedicated extractor for platform: {platform_name}, using generic selectors")
    return GenericExtractor(platform_name)

def get_extractor_for_url(url: str) -> BasePlatformExtractor:
    """Get the extractor for a product URL."""
    return get_extractor_for_platform(detect_platform(url))

def extract(markup: str, platform: str, url: str = None):
    """Extract a product from ``markup`` using the selectors for ``platform``."""
    return get_extractor_for_platform(platform).extract(markup, url)

__all__ = [
    'BasePlatformExtractor',
    'ExtractedProduct',
    'Fetcher',
    'PageFetcher',
    'first_non_empty',
    'get_supported_platforms',
    'detect_platform',
    'host_label',
    'get_extractor_for_platform',
    'get_extractor_for_url',
    'extract',
]
