"""
Centralized configuration for the sales engine.

Configuration is loaded from environment variables (and an optional .env
file) with sensible defaults.

Usage:
    from sales_engine.config import config

    items_csv = config.data.path_for("items")
    top_n = config.analytics.top_earners_default
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


REPOSITORY_KEYS = (
    "items",
    "merchants",
    "invoices",
    "invoice_items",
    "transactions",
    "customers",
)


@dataclass(frozen=True)
class DataConfig:
    """Source CSV file configuration."""

    data_dir: Path = field(
        default_factory=lambda: Path(os.getenv("SALES_ENGINE_DATA_DIR", "./data"))
    )

    # Repository key to file name mapping
    file_names: Dict[str, str] = field(default_factory=lambda: {
        key: f"{key}.csv" for key in REPOSITORY_KEYS
    })

    def path_for(self, key: str) -> Path:
        """Get the default CSV path for a repository key."""
        return self.data_dir / self.file_names.get(key, f"{key}.csv")


@dataclass(frozen=True)
class AnalyticsConfig:
    """SalesAnalyst thresholds and defaults."""

    top_earners_default: int = 20
    golden_items_sigma: int = 2
    invoice_count_sigma: int = 2


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("SALES_ENGINE_LOG_LEVEL", "INFO"))
    json_format: bool = field(
        default_factory=lambda: os.getenv("SALES_ENGINE_LOG_JSON", "").lower() in {"1", "true", "yes"}
    )


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""

    version: str = "1.0.0"
    data: DataConfig = field(default_factory=DataConfig)
    analytics: AnalyticsConfig = field(default_factory=AnalyticsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global config instance
config = AppConfig()


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def validate_config(app_config: AppConfig = config) -> None:
    """
    Validate configuration values.

    Call this on startup to fail fast with clear error messages
    instead of cryptic runtime failures.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    errors = []

    if app_config.logging.level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"SALES_ENGINE_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}, "
            f"got {app_config.logging.level!r}"
        )

    if app_config.analytics.top_earners_default < 0:
        errors.append("top_earners_default cannot be negative")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
