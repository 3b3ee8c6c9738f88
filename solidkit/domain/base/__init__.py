"""Base domain layer - shared kernel for all lessons."""

from .capability import Capability
from .consumer import Consumer
from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    DomainException,
    OperationFailedError,
    ValidationError,
)

__all__ = [
    # Contracts
    "Capability",
    "Consumer",
    # Exceptions
    "DomainException",
    "OperationFailedError",
    "ValidationError",
    "ContractViolationError",
    "ConfigurationError",
]
