# ABOUTME: Harvest settings read from MCC_MNC_HARVEST_* environment variables and .env
# ABOUTME: Provides type-safe access to source pages, output paths, HTTP and logging settings

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

WIKI_URL = "https://en.wikipedia.org/wiki/Mobile_country_code"
WIKI_URL_REGIONS = [
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_2xx_(Europe)",
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_3xx_(North_America)",
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_4xx_(Asia)",
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_5xx_(Oceania)",
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_6xx_(Africa)",
    "https://en.wikipedia.org/wiki/Mobile_Network_Codes_in_ITU_region_7xx_(South_America)",
]


class Config(BaseSettings):
    """Source pages, output paths and HTTP and logging settings."""

    model_config = SettingsConfigDict(
        env_prefix="MCC_MNC_HARVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Source pages
    wiki_url: str = Field(default=WIKI_URL, description="Global overview page, processed last with globals only")
    region_urls: list[str] = Field(
        default_factory=lambda: list(WIKI_URL_REGIONS),
        description="Per-region pages, processed in order before the global page",
    )

    # Output destinations
    records_output: Path = Field(default=Path("mcc-mnc-list.json"), description="Destination for the record list")
    status_codes_output: Path = Field(
        default=Path("status-codes.json"), description="Destination for the sorted status code list"
    )

    # HTTP Configuration
    user_agent: str = Field(
        default="mcc-mnc-harvest/1.0 (+https://en.wikipedia.org/wiki/Mobile_country_code)",
        description="User-Agent header sent with every page request",
    )
    request_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Settings read from the environment and ``.env`` on first use, then shared."""
    return Config()


def reload_config() -> Config:
    """Drop the shared settings and read them again, e.g. after tests change the environment."""
    get_config.cache_clear()
    return get_config()
