"""
Configuration management for the billing engine.
"""

from decimal import Decimal
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BillingSettings(BaseSettings):
    """Configuration settings for the billing engine."""

    # Logging
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")
    log_format: Literal["standard", "json"] = Field(
        default="standard", alias="LOG_FORMAT"
    )
    log_file: Optional[Path] = Field(default=None, alias="LOG_FILE")

    # Billing Defaults
    default_mileage_rate: Decimal = Field(
        default=Decimal("0.70"), alias="DEFAULT_MILEAGE_RATE"
    )
    default_minimum_hours: Decimal = Field(
        default=Decimal("2"), alias="DEFAULT_MINIMUM_HOURS"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def lowercase_log_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("log_file", mode="before")
    @classmethod
    def blank_log_file_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("default_mileage_rate", "default_minimum_hours")
    @classmethod
    def validate_non_negative(cls, v, info):
        """Billing defaults cannot be negative."""
        if v < 0:
            raise ValueError(f"{info.field_name} must be non-negative, got {v}")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG=true forces debug logging regardless of LOG_LEVEL."""
        return "DEBUG" if self.debug else self.log_level


def load_config(env_file: Optional[str] = None) -> BillingSettings:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return BillingSettings()


# Global configuration instance
_config: Optional[BillingSettings] = None


def get_config() -> BillingSettings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> BillingSettings:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
