"""Application configuration settings."""
from pydantic_settings import BaseSettings
from typing import List, Optional
from functools import lru_cache

DEFAULT_USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
]

class Settings(BaseSettings):
    """Application settings."""

    # Fetch settings
    fetch_timeout_seconds: float = 8.0  # bounded wait per platform
    user_agents: List[str] = DEFAULT_USER_AGENTS
    verify_ssl: bool = True

    # ScraperAPI Configuration (optional proxy for page fetches)
    scraper_api_key: Optional[str] = None
    scraper_api_base_url: str = "http://api.scraperapi.com"

    # Comparison settings
    enable_cross_platform: bool = True
    max_features: int = 10
    max_name_length: int = 150

    # Debug / logging settings
    debug: bool = False
    log_dir: str = "logs"
    log_to_file: bool = True

    class Config:
        """Pydantic config."""
        env_file = ".env"
        case_sensitive = False
        extra = "allow"  # Allow extra fields

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()
