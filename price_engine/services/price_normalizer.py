"""Convert scraped price text into a numeric amount.

Handles currency symbols, the "Rs." prefix, comma grouping (both western
and Indian lakh grouping) and K / L / Cr magnitude suffixes.
"""
import logging
import math
import re
from typing import Optional

from price_engine.schemas.models import ExtractedPrice, Provenance

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₹"

# Everything except digits, separators, currency markers and letters is replaced
# with a space, then every word other than Rs / K / L / LAKH / LAC / CR / CRORE.
# Whole words go, so "1 kg" never leaves a stray "k" behind.
_STRIP_PATTERN = re.compile(r"[^\d.,₹$€£\sA-Za-z]")
_WORD_PATTERN = re.compile(r"[A-Za-z]+")
PRICE_WORDS = frozenset({"rs", "k", "l", "lakh", "lac", "cr", "crore"})

# Most specific first, so a bare number never wins over a currency-qualified one
PRICE_PATTERNS = (
    re.compile(r"[₹$€£]\s*(\d[\d,]*(?:\.\d+)?)"),
    re.compile(r"Rs\.?\s*(\d[\d,]*(?:\.\d{1,2})?)", re.IGNORECASE),
    re.compile(r"(\d[\d,]*(?:\.\d+)?)\s*(?:crore|cr|lakh|lac|l|k)\b", re.IGNORECASE),
    re.compile(r"(\d{1,3}(?:,\d{2,3})+(?:\.\d{1,2})?)"),
    re.compile(r"(\d+(?:\.\d{1,2})?)"),
)

# Checked in this order: "Cr" and "L" must not be read as a plain "K"
MAGNITUDE_TOKENS = (
    (re.compile(r"\d\s*(?:CRORE|CR)\b"), 10_000_000),
    (re.compile(r"\d\s*(?:LAKH|LAC|L)\b"), 100_000),
    (re.compile(r"\d\s*K\b"), 1_000),
)


def _keep_price_word(match) -> str:
    word = match.group(0)
    return word if word.lower() in PRICE_WORDS else " "


def _magnitude(original_text: str) -> int:
    upper_text = original_text.upper()
    for pattern, multiplier in MAGNITUDE_TOKENS:
        if pattern.search(upper_text):
            return multiplier
    return 1


def parse_amount(text: str) -> Optional[float]:
    """Return the numeric value in ``text`` or None if nothing parses."""
    if not text:
        return None

    cleaned = _WORD_PATTERN.sub(_keep_price_word, _STRIP_PATTERN.sub(" ", text)).strip()
    logger.debug(f"Extracting from: '{text}' -> '{cleaned}'")

    for pattern in PRICE_PATTERNS:
        match = pattern.search(cleaned)
        if not match:
            continue
        try:
            value = float(match.group(1).replace(",", ""))
        except ValueError:
            continue
        if math.isnan(value):
            continue
        return value * _magnitude(text)

    logger.debug(f"No price found in '{text}'")
    return None


def normalize(text: str) -> Optional[ExtractedPrice]:
    """Normalize price text into an ExtractedPrice, or None.

    Zero and negative values count as "no price found".
    """
    value = parse_amount(text)
    if value is None or value <= 0 or math.isinf(value):
        return None
    return ExtractedPrice(amount=value, provenance=Provenance.EXTRACTED)


def format_price(amount: float) -> str:
    """Render an amount the way listing pages show it, e.g. ``₹1,234.50``."""
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"
