"""Built-in Variant Registration Module.

Registers every variant shipped with the lessons so the composition root
can select them by name from configuration.
"""

from typing import Any, Dict, Optional

from solidkit.domain.cars import (
    CarBlueprint,
    CarRepository,
    DealershipRepository,
    GarageRepository,
    PickupBlueprint,
    SedanBlueprint,
    SuvBlueprint,
)
from solidkit.domain.payments import CreditCardPayment, PaymentSource, RewardsPayment
from solidkit.domain.printing import FlatbedScanner, LaserPrinter, OfficeMultiFunction, Printer, Scanner
from solidkit.domain.users import MySqlRecordStore, PostgresRecordStore, RecordStore
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.registry.variant_registry import VariantRegistry, get_variant_registry


def create_credit_card_payment(options: Dict[str, Any]) -> CreditCardPayment:
    """
    Create credit card payment variant from options.

    Args:
        options: card_number and optional limit

    Returns:
        CreditCardPayment instance
    """
    from solidkit.config.schemas import CreditCardOptions

    config = CreditCardOptions(**options)
    return CreditCardPayment(card_number=config.card_number, limit=config.limit)


def create_rewards_payment(options: Dict[str, Any]) -> RewardsPayment:
    """
    Create rewards payment variant from options.

    Args:
        options: points and optional points_per_unit

    Returns:
        RewardsPayment instance
    """
    from solidkit.config.schemas import RewardsOptions

    config = RewardsOptions(**options)
    return RewardsPayment(points=config.points, points_per_unit=config.points_per_unit)


def _stateless(variant_cls):
    def factory(options: Dict[str, Any]):
        return variant_cls()
    return factory


BUILTIN_VARIANTS = (
    (RecordStore, "mysql", _stateless(MySqlRecordStore)),
    (RecordStore, "postgres", _stateless(PostgresRecordStore)),
    (PaymentSource, "credit_card", create_credit_card_payment),
    (PaymentSource, "rewards", create_rewards_payment),
    (Printer, "office", _stateless(OfficeMultiFunction)),
    (Printer, "laser", _stateless(LaserPrinter)),
    (Scanner, "office", _stateless(OfficeMultiFunction)),
    (Scanner, "flatbed", _stateless(FlatbedScanner)),
    (CarRepository, "garage", _stateless(GarageRepository)),
    (CarRepository, "dealership", _stateless(DealershipRepository)),
    (CarBlueprint, "sedan", _stateless(SedanBlueprint)),
    (CarBlueprint, "suv", _stateless(SuvBlueprint)),
    (CarBlueprint, "pickup", _stateless(PickupBlueprint)),
)


def register_builtin_variants(registry: Optional[VariantRegistry] = None) -> VariantRegistry:
    """
    Register built-in variants with the variant registry.

    Variants that are already registered are left alone, so calling this
    more than once is safe.

    Args:
        registry: Registry to populate, defaults to the global registry

    Returns:
        The populated registry
    """
    registry = registry or get_variant_registry()
    logger = get_logger(__name__)

    registered = 0
    for contract, name, factory in BUILTIN_VARIANTS:
        if registry.is_registered(contract, name):
            continue
        registry.register_variant(contract, name, factory)
        registered += 1

    logger.debug(f"Registered {registered} built-in variants")
    return registry
