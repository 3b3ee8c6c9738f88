"""Tests for the composition root."""

from unittest.mock import Mock

import pytest

from solidkit.application.lesson_service import LessonService
from solidkit.config.manager import ConfigurationManager
from solidkit.config.schemas import AppConfig
from solidkit.domain.cars import CarBlueprint, PickupBlueprint
from solidkit.domain.payments import PaymentProcessor, PaymentSource, RewardsPayment
from solidkit.domain.printing import FlatbedScanner, ScanJob
from solidkit.domain.users import MySqlRecordStore, RecordStore, UserCreator
from solidkit.infrastructure.di import DIContainer
from solidkit.infrastructure.di.services import (
    WIRED_CONTRACTS,
    register_all_services,
    register_variant_services,
)
from solidkit.infrastructure.registry import UnsupportedVariantError, get_variant_registry


def manager_for(data) -> ConfigurationManager:
    manager = Mock(spec=ConfigurationManager)
    manager.app_config = AppConfig.from_dict(data)
    return manager


class TestRegisterAllServices:
    """Test cases for register_all_services."""

    def test_every_wired_contract_registered(self):
        """Test that every wired contract gets a registration."""
        container = register_all_services(DIContainer(), manager_for({}))

        for contract in WIRED_CONTRACTS.values():
            assert container.is_registered(contract)
        assert container.is_registered(AppConfig)

    def test_consumers_receive_configured_variants(self):
        """Test that consumers receive the configured variants."""
        container = register_all_services(DIContainer(), manager_for({
            "wiring": {
                "record_store": "mysql",
                "payment_source": "rewards",
                "scanner": "flatbed",
                "car_blueprint": "pickup",
            },
        }))

        assert isinstance(container.get(UserCreator).dependency, MySqlRecordStore)
        assert isinstance(container.get(PaymentProcessor).dependency, RewardsPayment)
        assert isinstance(container.get(ScanJob).dependency, FlatbedScanner)
        assert isinstance(container.get(CarBlueprint), PickupBlueprint)
        assert container.get(UserCreator).create("r1") == "mysql:r1"

    def test_variant_options_flow_from_config(self):
        """Test that variant options come from configuration."""
        container = register_all_services(DIContainer(), manager_for({
            "wiring": {"payment_source": "rewards"},
            "variants": {"rewards": {"points": 3000, "points_per_unit": 10}},
        }))

        source = container.get(PaymentSource)

        assert source.points == 3000
        assert source.points_per_unit == 10

    def test_lesson_service_resolvable(self):
        """Test that the lesson service can be resolved."""
        container = register_all_services(DIContainer(), manager_for({}))

        service = container.get(LessonService)

        assert service.registry is get_variant_registry()
        assert service.list_lessons()[0]["variant"] == "garage"

    def test_unknown_variant_in_wiring(self):
        """Test that an unknown wired variant is reported."""
        with pytest.raises(UnsupportedVariantError):
            register_all_services(DIContainer(), manager_for({"wiring": {"record_store": "sqlite"}}))


class TestRegisterVariantServices:
    """Test cases for register_variant_services."""

    def test_uses_given_registry(self):
        """Test that the given registry is used."""
        registry = Mock()
        registry.create_variant.side_effect = lambda contract, name, options: f"{contract.__name__}:{name}"
        container = DIContainer()

        register_variant_services(container, AppConfig(), registry)

        assert container.get(RecordStore) == "RecordStore:postgres"
        assert registry.create_variant.call_count == len(WIRED_CONTRACTS)

