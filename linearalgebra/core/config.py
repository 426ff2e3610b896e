"""
Library configuration.

Settings are read from ``LINALG_``-prefixed environment variables or a
``.env`` file.
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings"""

    # Summation
    SUMMATION: str = "naive"  # default strategy for linear_algebra()
    PRECISION_SUMMATION: str = "neumaier"  # strategy of the precision build

    # Comparison
    COMPARE_TOLERANCE: float = 1e-9

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="LINALG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
