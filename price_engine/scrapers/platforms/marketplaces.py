"""Marketplaces known by host and search URL, read with the generic selectors."""
from .generic import GenericExtractor

class NykaaExtractor(GenericExtractor):
    platform_name = "Nykaa"
    url_pattern = r"nykaa\."
    search_url_template = "https://www.nykaa.com/search/result/?q={terms}"
    base_url = "https://www.nykaa.com"

class AjioExtractor(GenericExtractor):
    platform_name = "Ajio"
    url_pattern = r"ajio\."
    search_url_template = "https://www.ajio.com/search/?text={terms}"
    base_url = "https://www.ajio.com"

class CromaExtractor(GenericExtractor):
    platform_name = "Croma"
    url_pattern = r"croma\."
    search_url_template = "https://www.croma.com/searchB?q={terms}"
    base_url = "https://www.croma.com"

class RelianceDigitalExtractor(GenericExtractor):
    platform_name = "Reliance Digital"
    url_pattern = r"reliancedigital\."
    search_url_template = "https://www.reliancedigital.in/search?q={terms}"
    base_url = "https://www.reliancedigital.in"

class PurplleExtractor(GenericExtractor):
    platform_name = "Purplle"
    url_pattern = r"purplle\."
    search_url_template = "https://www.purplle.com/search?q={terms}"
    base_url = "https://www.purplle.com"
