import pytest

from solidkit.application.lesson_service import LessonService
from solidkit.config.schemas import AppConfig
from solidkit.domain.printing import Document
from solidkit.infrastructure.registry.registration import register_builtin_variants
from solidkit.infrastructure.registry.variant_registry import (
    VariantRegistry,
    get_variant_registry,
    reset_variant_registry,
)


@pytest.fixture(autouse=True)
def clean_registry():
    """Give every test an empty global variant registry."""
    reset_variant_registry()
    yield
    reset_variant_registry()


@pytest.fixture
def registry() -> VariantRegistry:
    """Global registry populated with the built-in variants."""
    return register_builtin_variants(get_variant_registry())


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def lesson_service(registry, app_config) -> LessonService:
    return LessonService(registry, app_config)


@pytest.fixture
def document() -> Document:
    return Document(title="Quarterly report", pages=3)
