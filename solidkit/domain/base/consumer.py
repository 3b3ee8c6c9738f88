"""Consumer base - the dependent side of every lesson.

A consumer holds exactly one capability reference, handed to it from the
outside, and drives a fixed sequence of contract operations against it.
It never constructs a variant and never inspects which variant it holds.
"""
from typing import Any, ClassVar, Iterable, List, Sequence, Tuple, Type, Union

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import ContractViolationError, OperationFailedError
from solidkit.infrastructure.logging.logger import get_logger

Step = Union[Tuple[str, Sequence[Any]], Tuple[str, Sequence[Any], dict]]


class Consumer:
    """
    Base class for consumers wired by constructor injection.

    Subclasses set ``requires`` to the contract they depend on and express
    their behaviour as calls to ``_run``.
    """

    requires: ClassVar[Type[Capability]] = Capability

    def __init__(self, dependency: Capability):
        """
        Initialize consumer with its capability.

        Args:
            dependency: Fully constructed variant of ``requires``

        Raises:
            ContractViolationError: If the dependency does not satisfy ``requires``
        """
        self.logger = get_logger(type(self).__module__)
        self._dependency = self._validate(dependency)

    @property
    def dependency(self) -> Capability:
        """The injected capability."""
        return self._dependency

    def rewire(self, dependency: Capability) -> None:
        """
        Replace the injected capability from the outside.

        Args:
            dependency: Fully constructed variant of ``requires``
        """
        self._dependency = self._validate(dependency)
        self.logger.debug(f"{type(self).__name__} rewired to a new {self.requires.capability_name()}")

    def _validate(self, dependency: Any) -> Capability:
        if not isinstance(dependency, self.requires):
            raise ContractViolationError(
                f"{type(self).__name__} requires {self.requires.capability_name()}, "
                f"got {type(dependency).__name__}",
                contract=self.requires,
            )
        return dependency

    def _run(self, steps: Iterable[Step]) -> List[Any]:
        """
        Execute contract operations in order against the injected capability.

        Args:
            steps: (operation, args) or (operation, args, kwargs) tuples

        Returns:
            The effect returned by each operation, in order

        Raises:
            ContractViolationError: If a step names an operation outside ``requires``
            OperationFailedError: Propagated unchanged from the failing operation;
                the remaining steps are not executed
        """
        allowed = self.requires.operations()
        effects = []

        for step in steps:
            operation, args = step[0], step[1]
            kwargs = step[2] if len(step) > 2 else {}

            if operation not in allowed:
                raise ContractViolationError(
                    f"{operation} is not an operation of {self.requires.capability_name()}",
                    contract=self.requires,
                )

            try:
                effect = getattr(self._dependency, operation)(*args, **kwargs)
            except OperationFailedError as e:
                self.logger.info(
                    f"{type(self).__name__} aborted at {operation}: {e.reason}"
                )
                raise

            effects.append(effect)

        return effects
