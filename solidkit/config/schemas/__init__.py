"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .wiring_schema import CreditCardOptions, RewardsOptions, VariantOptions, WiringConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "WiringConfig",
    "VariantOptions",
    "CreditCardOptions",
    "RewardsOptions",
]
