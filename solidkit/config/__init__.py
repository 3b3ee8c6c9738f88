"""Configuration package.

Typed configuration lives in config.schemas; ConfigurationManager loads it
from files and environment variables.
"""

from solidkit.config.schemas import (
    AppConfig,
    CreditCardOptions,
    LoggingConfig,
    RewardsOptions,
    VariantOptions,
    WiringConfig,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "WiringConfig",
    "VariantOptions",
    "CreditCardOptions",
    "RewardsOptions",
]
