"""
Configuration management for Relative Standing.

Uses Pydantic settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables or a local .env file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Lists are read from the environment as JSON:
    LOWER_IS_BETTER_METRICS='["turnovers", "lap_time"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # Application Metadata
    # ==========================================================================
    app_name: str = "Relative Standing"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")

    # ==========================================================================
    # Calculation
    # ==========================================================================
    decimal_precision: int = Field(
        default=28,
        ge=10,
        le=100,
        description="Significant digits used for intermediate percentile arithmetic",
    )
    default_higher_is_better: bool = Field(
        default=True,
        description="Direction used when neither a flag nor a known metric is given",
    )
    small_sample_warning_threshold: int = Field(
        default=20,
        ge=1,
        description="Groups smaller than this are flagged with small_sample_warning",
    )
    lower_is_better_metrics: list[str] = Field(
        default_factory=list,
        description="Metric names where a lower value ranks better (e.g. turnovers)",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("lower_is_better_metrics")
    @classmethod
    def _normalize_metrics(cls, value: list[str]) -> list[str]:
        return [name.strip().lower() for name in value if name.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
