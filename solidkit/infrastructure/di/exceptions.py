"""Dependency injection errors."""
from typing import Any, List, Optional, Type


def _type_name(cls: Any) -> str:
    return cls.__name__ if hasattr(cls, '__name__') else str(cls)


class DependencyResolutionError(Exception):
    """Raised when a dependency cannot be resolved."""

    def __init__(self, dependency_type: Any, message: str,
                 parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message)
        self.dependency_type = dependency_type
        self.parent_type = parent_type
        self.parameter_name = parameter_name
        self.cause = cause


class UnregisteredDependencyError(DependencyResolutionError):
    """Raised when a type is neither registered nor constructible."""

    def __init__(self, dependency_type: Any, parent_type: Optional[Type] = None,
                 parameter_name: Optional[str] = None):
        message = f"No registration found for {_type_name(dependency_type)}"
        if parent_type is not None:
            message += f" required by {_type_name(parent_type)}"
        if parameter_name:
            message += f" (parameter '{parameter_name}')"
        super().__init__(dependency_type, message, parent_type, parameter_name)


class UntypedParameterError(DependencyResolutionError):
    """Raised when a constructor parameter has no type annotation."""

    def __init__(self, dependency_type: Any, parameter_name: str):
        super().__init__(
            dependency_type,
            f"Cannot resolve untyped parameter '{parameter_name}' of {_type_name(dependency_type)}",
            parameter_name=parameter_name,
        )


class CircularDependencyError(DependencyResolutionError):
    """Raised when resolution runs into a dependency cycle."""

    def __init__(self, chain: List[Any]):
        names = " -> ".join(_type_name(cls) for cls in chain)
        super().__init__(chain[-1], f"Circular dependency detected: {names}")
        self.chain = chain


class InstantiationError(DependencyResolutionError):
    """Raised when a constructor fails."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)


class FactoryError(DependencyResolutionError):
    """Raised when a registered factory fails."""

    def __init__(self, dependency_type: Any, message: str, cause: Optional[Exception] = None):
        super().__init__(dependency_type, message, cause=cause)
