"""Configuration module for the billing engine."""

from staffing_billing.config.settings import (
    BillingSettings,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    "BillingSettings",
    "get_config",
    "load_config",
    "reload_config",
]
