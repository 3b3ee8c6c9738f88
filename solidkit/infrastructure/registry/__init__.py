"""Variant registry and built-in registrations."""

from .variant_registry import (
    UnsupportedVariantError,
    VariantRegistration,
    VariantRegistry,
    get_variant_registry,
    reset_variant_registry,
)

__all__ = [
    "UnsupportedVariantError",
    "VariantRegistration",
    "VariantRegistry",
    "get_variant_registry",
    "reset_variant_registry",
]
