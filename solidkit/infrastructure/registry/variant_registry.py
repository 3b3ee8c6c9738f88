"""Variant Registry - Registry pattern for capability variant factories.

This module implements the registry pattern for variant creation, keeping
the choice of a concrete variant out of consumers. A consumer never looks
variants up by name; only the composition root does.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Type
import threading

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import ConfigurationError
from solidkit.infrastructure.logging.logger import get_logger

VariantFactory = Callable[[Dict[str, Any]], Capability]


class UnsupportedVariantError(ConfigurationError):
    """Exception raised when an unregistered variant is requested."""
    pass


class VariantRegistration:
    """Container for variant registration information."""

    def __init__(self, contract: Type[Capability], name: str, factory: VariantFactory):
        """
        Initialize variant registration.

        Args:
            contract: Capability contract the variant satisfies
            name: Variant name, unique per contract (e.g. 'mysql', 'postgres')
            factory: Factory function taking an options dict and returning the variant
        """
        self.contract = contract
        self.name = name
        self.factory = factory

    def __repr__(self) -> str:
        return f"VariantRegistration(contract='{self.contract.__name__}', name='{self.name}')"


class VariantRegistry:
    """
    Registry for capability variant factories.

    Adding a variant is a registration, never an edit to a consumer.

    Thread-safe singleton implementation.
    """

    _instance: Optional['VariantRegistry'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'VariantRegistry':
        """Ensure singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize variant registry."""
        if hasattr(self, '_initialized'):
            return

        self._registrations: Dict[Tuple[Type[Capability], str], VariantRegistration] = {}
        self._registry_lock = threading.Lock()
        self.logger = get_logger(__name__)
        self._initialized = True

        self.logger.debug("Variant registry initialized")

    def register_variant(self,
                         contract: Type[Capability],
                         name: str,
                         factory: VariantFactory) -> None:
        """
        Register a variant of a contract.

        Args:
            contract: Capability contract the variant satisfies
            name: Variant name, unique per contract
            factory: Factory function taking an options dict

        Raises:
            ConfigurationError: If the contract is not a capability contract
                or the name is already registered for it
        """
        if not (isinstance(contract, type) and issubclass(contract, Capability)
                and contract.is_contract()):
            raise ConfigurationError(f"{contract!r} is not a capability contract")

        with self._registry_lock:
            key = (contract, name)
            if key in self._registrations:
                raise ConfigurationError(
                    f"Variant '{name}' is already registered for {contract.__name__}"
                )

            registration = VariantRegistration(contract, name, factory)
            self._registrations[key] = registration

            self.logger.debug(f"Registered variant: {registration}")

    def create_variant(self,
                       contract: Type[Capability],
                       name: str,
                       options: Optional[Dict[str, Any]] = None) -> Capability:
        """
        Create a variant of a contract by name.

        Args:
            contract: Capability contract
            name: Registered variant name
            options: Construction options passed to the factory

        Returns:
            Variant instance

        Raises:
            UnsupportedVariantError: If the variant is not registered
            ConfigurationError: If the factory fails or returns something
                that does not satisfy the contract
        """
        registration = self._get_registration(contract, name)

        try:
            variant = registration.factory(dict(options or {}))
        except Exception as e:
            error_msg = f"Failed to create variant '{name}' for {contract.__name__}: {str(e)}"
            self.logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

        if not isinstance(variant, contract):
            raise ConfigurationError(
                f"Factory for '{name}' returned {type(variant).__name__}, "
                f"which does not satisfy {contract.__name__}"
            )

        self.logger.debug(f"Created variant '{name}' for {contract.__name__}")
        return variant

    def get_registered_names(self, contract: Type[Capability]) -> List[str]:
        """
        Get variant names registered for a contract.

        Returns:
            Names in registration order
        """
        with self._registry_lock:
            return [name for (registered, name) in self._registrations if registered is contract]

    def get_registered_contracts(self) -> List[Type[Capability]]:
        """Get every contract with at least one registered variant."""
        with self._registry_lock:
            contracts = []
            for contract, _ in self._registrations:
                if contract not in contracts:
                    contracts.append(contract)
            return contracts

    def is_registered(self, contract: Type[Capability], name: str) -> bool:
        """Check if a variant name is registered for a contract."""
        with self._registry_lock:
            return (contract, name) in self._registrations

    def clear_registrations(self) -> None:
        """
        Clear all variant registrations.

        This method is primarily for testing purposes.
        """
        with self._registry_lock:
            self._registrations.clear()
            self.logger.debug("Cleared all variant registrations")

    def _get_registration(self, contract: Type[Capability], name: str) -> VariantRegistration:
        with self._registry_lock:
            key = (contract, name)
            if key not in self._registrations:
                available = [n for (c, n) in self._registrations if c is contract]
                raise UnsupportedVariantError(
                    f"Variant '{name}' is not registered for {contract.__name__}. "
                    f"Available variants: {available}"
                )
            return self._registrations[key]


# Global registry instance
_variant_registry: Optional[VariantRegistry] = None


def get_variant_registry() -> VariantRegistry:
    """
    Get the global variant registry instance.

    Returns:
        Variant registry singleton instance
    """
    global _variant_registry
    if _variant_registry is None:
        _variant_registry = VariantRegistry()
    return _variant_registry


def reset_variant_registry() -> None:
    """
    Reset the global variant registry instance.

    This function is primarily for testing purposes.
    """
    global _variant_registry
    if _variant_registry is not None:
        _variant_registry.clear_registrations()
    _variant_registry = None
