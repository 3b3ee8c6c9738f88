"""
Dependency Injection Container implementation.

The container is the composition root's tool: variants are registered as the
instances behind their contracts, and consumers are built by resolving their
constructor annotations.
"""
from typing import Dict, Any, Type, TypeVar, Optional, Callable, cast, List
import inspect
import time
import typing
from contextlib import contextmanager
from typing import Iterator

from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.di.exceptions import (
    DependencyResolutionError,
    UnregisteredDependencyError,
    UntypedParameterError,
    CircularDependencyError,
    InstantiationError,
    FactoryError
)

T = TypeVar('T')
logger = get_logger(__name__)


@contextmanager
def timed_operation(operation_name: str) -> Iterator[None]:
    """Context manager to time and log an operation."""
    start_time = time.time()
    try:
        yield
    finally:
        elapsed_time = time.time() - start_time
        logger.debug(f"{operation_name} completed in {elapsed_time:.4f}s")


class DIContainer:
    """
    Dependency injection container.

    Features:
    - Pre-created instances, lazily created singletons and factories
    - Constructor auto-wiring from type annotations
    - Circular dependency detection
    """

    def __init__(self):
        """Initialize container."""
        self._singletons: Dict[Type, Any] = {}
        self._factories: Dict[Type, Callable[..., Any]] = {}
        self._instances: Dict[Type, Any] = {}

    def is_registered(self, cls: Type) -> bool:
        """
        Check if a type is registered with the container.

        Args:
            cls: Class type to check

        Returns:
            True if the type is registered, False otherwise
        """
        return (
            cls in self._singletons or
            cls in self._factories or
            cls in self._instances
        )

    def register_singleton(self, cls: Type[T], instance_or_factory: Any = None) -> None:
        """
        Register a singleton type.

        Args:
            cls: Class type to register
            instance_or_factory: Optional pre-created instance, implementation
                class or factory function taking the container
        """
        if instance_or_factory is None:
            self._singletons[cls] = cls
            logger.debug(f"Registered singleton type {cls.__name__}")
        elif isinstance(instance_or_factory, type):
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered singleton implementation {instance_or_factory.__name__} for {cls.__name__}")
        elif callable(instance_or_factory):
            try:
                instance = instance_or_factory(self)
            except Exception as e:
                logger.error(f"Failed to create singleton from factory for {cls.__name__}: {str(e)}")
                raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e
            self._singletons[cls] = instance
            logger.debug(f"Registered singleton from factory for {cls.__name__}")
        else:
            self._singletons[cls] = instance_or_factory
            logger.debug(f"Registered pre-created singleton for {cls.__name__}")

    def register_factory(self, cls: Type[T], factory: Callable[..., T]) -> None:
        """
        Register a factory function for a type.

        Args:
            cls: Class type to register
            factory: Factory function taking the container
        """
        self._factories[cls] = factory
        logger.debug(f"Registered factory for {cls.__name__}")

    def register_instance(self, cls: Type[T], instance: T) -> None:
        """
        Register a specific instance for a type.

        Args:
            cls: Class type to register
            instance: Instance to use
        """
        self._instances[cls] = instance
        logger.debug(f"Registered instance for {cls.__name__}")

    def get(self, cls: Type[T], parent_type: Optional[Type] = None,
            parameter_name: Optional[str] = None,
            dependency_chain: Optional[List[Type]] = None) -> T:
        """
        Get an instance of the specified type.

        Args:
            cls: Class type to get
            parent_type: Optional parent type that requires this dependency
            parameter_name: Optional parameter name in the parent type
            dependency_chain: Types currently being resolved, for cycle detection

        Returns:
            Instance of the requested type

        Raises:
            DependencyResolutionError: If the dependency cannot be resolved
        """
        class_name = cls.__name__ if hasattr(cls, '__name__') else str(cls)
        dependency_chain = list(dependency_chain or [])

        if cls in dependency_chain:
            raise CircularDependencyError(dependency_chain + [cls])

        new_chain = dependency_chain + [cls]

        with timed_operation(f"Resolve {class_name}"):
            if cls in self._instances:
                return cast(T, self._instances[cls])

            if cls in self._singletons:
                registered = self._singletons[cls]
                if isinstance(registered, type):
                    instance = self._create_instance(registered, new_chain)
                    self._singletons[cls] = instance
                    logger.debug(f"Singleton instance created for {class_name}")
                    return cast(T, instance)
                return cast(T, registered)

            if cls in self._factories:
                try:
                    return cast(T, self._factories[cls](self))
                except DependencyResolutionError:
                    raise
                except Exception as e:
                    logger.error(f"Factory failed to create instance of {class_name}: {str(e)}")
                    raise FactoryError(cls, f"Factory function failed: {str(e)}", e) from e

            if not isinstance(cls, type) or inspect.isabstract(cls):
                raise UnregisteredDependencyError(cls, parent_type, parameter_name)

            logger.debug(f"No registration found for {class_name}, attempting direct creation")
            return self._create_instance(cls, new_chain)

    def _create_instance(self, cls: Type[T], dependency_chain: List[Type]) -> T:
        """
        Create an instance of the specified type with dependencies.

        Parameters with defaults are resolved only when the container knows
        their type; otherwise the default is kept.
        """
        class_name = cls.__name__

        try:
            signature = inspect.signature(cls.__init__)
            hints = typing.get_type_hints(cls.__init__)
        except (ValueError, TypeError, NameError) as e:
            raise InstantiationError(cls, f"Failed to get constructor signature: {str(e)}", cause=e) from e

        kwargs = {}
        for param in list(signature.parameters.values())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            annotation = hints.get(param.name, inspect.Parameter.empty)
            annotation = self._unwrap_optional(annotation)
            has_default = param.default is not inspect.Parameter.empty

            if annotation is inspect.Parameter.empty:
                if has_default:
                    continue
                raise UntypedParameterError(cls, param.name)

            if has_default and not self.is_registered(annotation):
                continue

            kwargs[param.name] = self.get(annotation, cls, param.name, dependency_chain)

        try:
            instance = cls(**kwargs)
        except DependencyResolutionError:
            raise
        except Exception as e:
            logger.error(f"Failed to create instance of {class_name}: {str(e)}")
            raise InstantiationError(cls, f"Constructor failed: {str(e)}", cause=e) from e

        logger.debug(f"Created instance of {class_name}")
        return instance

    @staticmethod
    def _unwrap_optional(annotation: Any) -> Any:
        if typing.get_origin(annotation) is typing.Union:
            args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
            if len(args) == 1:
                return args[0]
        return annotation


_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """Get the global container instance."""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Reset the global container. Primarily for testing purposes."""
    global _container
    _container = None
