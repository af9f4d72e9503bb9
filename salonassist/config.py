"""
Centralized configuration with environment variable overrides.

Outreach thresholds, fallback prices and API settings are configurable
here. Nothing is hardcoded in the engine, generator or route logic.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from salonassist.logging_context import install_request_id_filter

load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] [%(request_id)s] %(levelname)s: %(message)s"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _optional_int(env_var: str) -> Optional[int]:
    """Parse an optional integer; unset or empty means None."""
    raw = os.getenv(env_var, "")
    if not raw.strip():
        return None
    return _safe_int(env_var, raw)


@dataclass(frozen=True)
class OutreachConfig:
    """Defaults for the outreach suggestion generator."""

    win_back_threshold_days: int = _safe_int("WIN_BACK_THRESHOLD_DAYS", "30")
    reminder_days_before: int = _safe_int("REMINDER_DAYS_BEFORE", "2")
    offer_validity_days: int = _safe_int("OFFER_VALIDITY_DAYS", "14")
    promotion_validity_days: int = _safe_int("PROMOTION_VALIDITY_DAYS", "30")
    promotion_sample_size: int = _safe_int("PROMOTION_SAMPLE_SIZE", "5")
    loyalty_min_visits: int = _safe_int("LOYALTY_MIN_VISITS", "5")


@dataclass(frozen=True)
class PricingConfig:
    """Fallback prices used when an item is missing from the catalog."""

    default_service_price: float = _safe_float("DEFAULT_SERVICE_PRICE", "40")
    default_product_price: float = _safe_float("DEFAULT_PRODUCT_PRICE", "20")


@dataclass(frozen=True)
class ApiConfig:
    """HTTP server settings."""

    host: str = os.getenv("API_HOST", "127.0.0.1")
    port: int = _safe_int("API_PORT", "3001")
    seed_on_startup: bool = os.getenv("SEED_ON_STARTUP", "true").lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    outreach: OutreachConfig = field(default_factory=OutreachConfig)
    pricing: PricingConfig = field(default_factory=PricingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "SalonAssist")
    random_seed: Optional[int] = _optional_int("RANDOM_SEED")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.outreach.win_back_threshold_days < 1:
        raise ValueError(
            "WIN_BACK_THRESHOLD_DAYS must be >= 1, "
            f"got {config.outreach.win_back_threshold_days}"
        )
    if config.outreach.reminder_days_before < 0:
        raise ValueError(
            f"REMINDER_DAYS_BEFORE must be >= 0, got {config.outreach.reminder_days_before}"
        )
    if config.outreach.offer_validity_days < 1:
        raise ValueError(
            f"OFFER_VALIDITY_DAYS must be >= 1, got {config.outreach.offer_validity_days}"
        )
    if config.outreach.promotion_validity_days < 1:
        raise ValueError(
            "PROMOTION_VALIDITY_DAYS must be >= 1, "
            f"got {config.outreach.promotion_validity_days}"
        )
    if config.outreach.promotion_sample_size < 0:
        raise ValueError(
            f"PROMOTION_SAMPLE_SIZE must be >= 0, got {config.outreach.promotion_sample_size}"
        )
    if config.outreach.loyalty_min_visits < 1:
        raise ValueError(
            f"LOYALTY_MIN_VISITS must be >= 1, got {config.outreach.loyalty_min_visits}"
        )

    for price_name, price_value in [
        ("DEFAULT_SERVICE_PRICE", config.pricing.default_service_price),
        ("DEFAULT_PRODUCT_PRICE", config.pricing.default_product_price),
    ]:
        if price_value < 0:
            raise ValueError(f"{price_name} must be >= 0, got {price_value}")

    if not 0 < config.api.port < 65536:
        raise ValueError(f"API_PORT must be between 1 and 65535, got {config.api.port}")


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    install_request_id_filter()
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
