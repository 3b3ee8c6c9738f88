"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .wiring_schema import VariantOptions, WiringConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    wiring: WiringConfig = Field(default_factory=lambda: WiringConfig())
    variants: VariantOptions = Field(default_factory=lambda: VariantOptions())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a raw dictionary."""
        return cls.model_validate(data)

    def variant_options(self, variant_name: str) -> Dict[str, Any]:
        """Get construction options for a variant, empty if it takes none."""
        options = getattr(self.variants, variant_name, None)
        if options is None:
            return {}
        return options.model_dump()
