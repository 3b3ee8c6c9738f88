# solidkit/domain/base/exceptions.py
from typing import Any, Optional, List


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class OperationFailedError(DomainException):
    """Raised when a capability operation could not complete.

    This is the single failure kind a capability operation may signal.
    Consumers never recover from it; they abort their sequence and let it
    reach their caller unchanged.
    """
    def __init__(self, operation: str, reason: str):
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ContractViolationError(DomainException):
    """Raised when wiring or invocation steps outside a capability contract."""
    def __init__(self, message: str, contract: Optional[type] = None):
        super().__init__(message)
        self.contract = contract


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
