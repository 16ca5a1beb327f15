"""
Configuration management using Pydantic Settings.

Settings are loaded from environment variables (prefixed with
``PACKET_COMPARE_``) or from a ``.env`` file in the working directory.
The defaults reproduce the standard grading rules; the penalties exist
so that an exercise can be graded more strictly without code changes.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Comparison settings loaded from environment variables.

    Settings are loaded from:
    1. Environment variables
    2. .env file in the working directory (if present)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Prefix that marks a word in an expected text value as case-sensitive
    exact_case_marker: str = Field(
        default="¡",
        min_length=1,
        description="Marker that makes the following word case-sensitive",
        alias="PACKET_COMPARE_EXACT_CASE_MARKER",
    )

    # Points lost when a date or time part differs only by a leading zero
    leading_zero_penalty: int = Field(
        default=0,
        ge=0,
        le=2,
        description="Penalty for a missing leading zero in a date or time",
        alias="PACKET_COMPARE_LEADING_ZERO_PENALTY",
    )

    # Points lost when phone numbers have the same digits but different punctuation
    phone_punctuation_penalty: int = Field(
        default=1,
        ge=0,
        le=2,
        description="Penalty for phone numbers differing only in punctuation",
        alias="PACKET_COMPARE_PHONE_PUNCTUATION_PENALTY",
    )

    # Upper bound on the LCS matrix size for a single text field
    max_alignment_cells: int = Field(
        default=1_000_000,
        gt=0,
        description="Largest expected x actual token product that will be aligned",
        alias="PACKET_COMPARE_MAX_ALIGNMENT_CELLS",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the command-line interface",
        alias="PACKET_COMPARE_LOG_LEVEL",
    )


# Global settings instance
# Access via: from packet_compare.config import settings
settings = Settings()
