"""Wiring configuration schema.

The wiring section is the only place where a variant is chosen by name.
Consumers never see these names; the composition root reads them and
injects the matching variant.
"""
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WiringConfig(BaseModel):
    """Variant selected for each capability contract."""
    model_config = ConfigDict(extra="forbid")

    record_store: str = Field("postgres", description="RecordStore variant (mysql, postgres)")
    payment_source: str = Field("credit_card", description="PaymentSource variant (credit_card, rewards)")
    printer: str = Field("office", description="Printer variant (office, laser)")
    scanner: str = Field("office", description="Scanner variant (office, flatbed)")
    car_repository: str = Field("garage", description="CarRepository variant (garage, dealership)")
    car_blueprint: str = Field("sedan", description="CarBlueprint variant (sedan, suv, pickup)")


class CreditCardOptions(BaseModel):
    """Credit card payment variant options."""

    card_number: str = Field("4111111111111111", description="Card number, only the last four digits are shown")
    limit: Decimal = Field(Decimal("1000.00"), description="Maximum amount per charge")

    @field_validator("card_number", mode="before")
    @classmethod
    def coerce_card_number(cls, v: Any) -> str:
        """Accept card numbers parsed as integers from YAML or the environment."""
        return str(v)


class RewardsOptions(BaseModel):
    """Rewards payment variant options."""

    points: int = Field(50000, ge=0, description="Points available for redemption")
    points_per_unit: int = Field(100, gt=0, description="Points redeemed per currency unit")


class VariantOptions(BaseModel):
    """Construction options for variants that carry configuration."""

    credit_card: CreditCardOptions = Field(default_factory=CreditCardOptions)
    rewards: RewardsOptions = Field(default_factory=RewardsOptions)
