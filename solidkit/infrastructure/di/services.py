"""Service registration - the composition root.

Reads the wiring configuration, builds the chosen variant for each
capability contract through the variant registry and registers it as the
instance behind that contract. Consumers are then resolved by the container
from their constructor annotations and never learn which variant they got.
"""
from typing import Dict, Optional, Type

from solidkit.config.manager import ConfigurationManager
from solidkit.config.schemas import AppConfig, WiringConfig
from solidkit.domain.base.capability import Capability
from solidkit.domain.cars import CarBlueprint, CarRepository
from solidkit.domain.payments import PaymentSource
from solidkit.domain.printing import Printer, Scanner
from solidkit.domain.users import RecordStore
from solidkit.infrastructure.di.container import DIContainer, get_container
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.registry.registration import register_builtin_variants
from solidkit.infrastructure.registry.variant_registry import VariantRegistry

logger = get_logger(__name__)

# Wiring field -> contract it selects a variant for
WIRED_CONTRACTS: Dict[str, Type[Capability]] = {
    "record_store": RecordStore,
    "payment_source": PaymentSource,
    "printer": Printer,
    "scanner": Scanner,
    "car_repository": CarRepository,
    "car_blueprint": CarBlueprint,
}


def register_variant_services(container: DIContainer,
                              config: AppConfig,
                              registry: VariantRegistry) -> None:
    """
    Register the configured variant of every wired contract.

    Args:
        container: Container to populate
        config: Application configuration
        registry: Registry holding variant factories
    """
    wiring: WiringConfig = config.wiring

    for field_name, contract in WIRED_CONTRACTS.items():
        variant_name = getattr(wiring, field_name)
        variant = registry.create_variant(
            contract, variant_name, config.variant_options(variant_name)
        )
        container.register_instance(contract, variant)
        logger.info(f"Wired {contract.__name__} to '{variant_name}'")


def register_all_services(container: Optional[DIContainer] = None,
                          config_manager: Optional[ConfigurationManager] = None,
                          registry: Optional[VariantRegistry] = None) -> DIContainer:
    """
    Register all services in the dependency injection container.

    Args:
        container: Optional container instance
        config_manager: Optional configuration manager
        registry: Optional variant registry

    Returns:
        Configured container
    """
    if container is None:
        container = get_container()
    if config_manager is None:
        config_manager = ConfigurationManager()

    registry = register_builtin_variants(registry)

    container.register_instance(ConfigurationManager, config_manager)
    container.register_instance(AppConfig, config_manager.app_config)
    container.register_instance(VariantRegistry, registry)

    register_variant_services(container, config_manager.app_config, registry)

    return container
