"""
Centralized configuration management for the geoadapters package.

All configuration is loaded from environment variables with sensible defaults.
Use the `settings` singleton for accessing configuration values.

Usage:
    from geoadapters.core.config import settings

    # Access configuration
    print(settings.HERE_API_KEY)
    print(settings.HTTP_TIMEOUT)
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
# Search in common locations
_env_paths = [
    Path(__file__).parent.parent.parent / ".env",  # repository root
    Path.cwd() / ".env",  # Current working directory
]

for env_path in _env_paths:
    if env_path.exists():
        load_dotenv(env_path)
        break


def _optional_env(name: str) -> Optional[str]:
    """Read an environment variable, treating empty strings as unset."""
    value = os.getenv(name, "").strip()
    return value or None


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # ==========================================================================
    # Provider Credentials
    # ==========================================================================
    BAIDU_API_KEY: Optional[str] = field(
        default_factory=lambda: _optional_env("BAIDU_API_KEY")
    )
    GEOCODER_CA_API_KEY: Optional[str] = field(
        default_factory=lambda: _optional_env("GEOCODER_CA_API_KEY")
    )
    HERE_APP_ID: Optional[str] = field(
        default_factory=lambda: _optional_env("HERE_APP_ID")
    )
    HERE_APP_CODE: Optional[str] = field(
        default_factory=lambda: _optional_env("HERE_APP_CODE")
    )
    HERE_API_KEY: Optional[str] = field(
        default_factory=lambda: _optional_env("HERE_API_KEY")
    )
    NAVER_API_KEY: Optional[str] = field(
        default_factory=lambda: _optional_env("NAVER_API_KEY")
    )
    WHAT3WORDS_API_KEY: Optional[str] = field(
        default_factory=lambda: _optional_env("WHAT3WORDS_API_KEY")
    )

    # ==========================================================================
    # IpGeoBase Data Files
    # ==========================================================================
    IPGEOBASE_CIDR_FILE: Path = field(
        default_factory=lambda: Path(os.getenv("IPGEOBASE_CIDR_FILE", "data/cidr_optim.txt"))
    )
    IPGEOBASE_CITY_FILE: Path = field(
        default_factory=lambda: Path(os.getenv("IPGEOBASE_CITY_FILE", "data/cities.txt"))
    )

    # ==========================================================================
    # HTTP Settings
    # ==========================================================================
    HTTP_TIMEOUT: float = field(
        default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10"))
    )
    USER_AGENT: str = field(
        default_factory=lambda: os.getenv("USER_AGENT", "geoadapters/0.1")
    )

    # ==========================================================================
    # Provider Options
    # ==========================================================================
    GEOCODER_CA_USE_SSL: bool = field(
        default_factory=lambda: os.getenv("GEOCODER_CA_USE_SSL", "false").lower() == "true"
    )
    GEOCODER_LOCALE: Optional[str] = field(
        default_factory=lambda: _optional_env("GEOCODER_LOCALE")
    )
    GEOCODER_MAX_RESULTS: int = field(
        default_factory=lambda: int(os.getenv("GEOCODER_MAX_RESULTS", "5"))
    )

    def validate_baidu(self) -> bool:
        """Check if the Baidu API key is configured."""
        return bool(self.BAIDU_API_KEY)

    def validate_here(self) -> bool:
        """Check if either generation of HERE credentials is configured."""
        return bool(self.HERE_API_KEY or (self.HERE_APP_ID and self.HERE_APP_CODE))

    def validate_naver(self) -> bool:
        """Check if the Naver API key is configured."""
        return bool(self.NAVER_API_KEY)

    def validate_what3words(self) -> bool:
        """Check if the what3words API key is configured."""
        return bool(self.WHAT3WORDS_API_KEY)

    def validate_ipgeobase_files(self) -> bool:
        """Check if both IpGeoBase data files are present."""
        return self.IPGEOBASE_CIDR_FILE.is_file() and self.IPGEOBASE_CITY_FILE.is_file()


# Singleton settings instance
settings = Settings()
