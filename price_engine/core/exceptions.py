"""Error taxonomy for the price engine.

Everything below ``analyze`` recovers locally from these, except
``MalformedInput`` which is the only request-level failure.
"""


class PriceEngineError(Exception):
    """Base class for price engine errors."""


class TransientFetchError(PriceEngineError):
    """Network error, timeout or non-2xx response while fetching a page."""

    def __init__(self, url: str, reason: str, status_code: int = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")


class ExtractionMiss(PriceEngineError):
    """Markup was present but no selector produced a name and a price."""

    def __init__(self, platform: str, detail: str = "no product name or price found"):
        self.platform = platform
        super().__init__(f"{platform}: {detail}")


class ImplausiblePrice(PriceEngineError):
    """An extracted price failed absolute or category validation."""

    def __init__(self, price: float, reason: str, suggestion: float = None):
        self.price = price
        self.reason = reason
        self.suggestion = suggestion
        super().__init__(reason)


class MalformedInput(PriceEngineError, ValueError):
    """Empty or unusable product query."""
