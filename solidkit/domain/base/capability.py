"""Capability contracts - the abstraction side of every lesson.

A capability is an ABC whose abstract methods are its operations. Any
subclass that declares abstract methods of its own is a contract; concrete
subclasses are variants of the contracts they inherit from.

Architecture:
- Domain layer defines contracts (subclasses of Capability)
- Variants implement one contract, or several narrow ones
- Consumers depend on a contract, never on a variant
"""
from abc import ABC
from typing import Tuple, Type


class Capability(ABC):
    """Base class for capability contracts and their variants."""

    _declared_operations: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Only names declared abstract in this class body; vars() keeps definition order
        cls._declared_operations = tuple(
            name for name, value in vars(cls).items()
            if getattr(value, "__isabstractmethod__", False)
        )

    @classmethod
    def is_contract(cls) -> bool:
        """Check whether this class declares operations of its own."""
        return bool(cls.__dict__.get("_declared_operations"))

    @classmethod
    def contracts(cls) -> Tuple[Type["Capability"], ...]:
        """
        Get the contracts this class is bound to.

        Returns:
            Contract classes in MRO order, most specific first
        """
        return tuple(
            base for base in cls.__mro__
            if isinstance(base, type) and issubclass(base, Capability)
            and base is not Capability and base.is_contract()
        )

    @classmethod
    def operations(cls) -> Tuple[str, ...]:
        """
        Get every operation name this class must fulfil.

        Base contracts come first, sibling contracts in the order they are
        listed as bases, each contract's operations in the order they were
        declared.
        """
        ordered = []
        cls._collect_operations(ordered)
        return tuple(ordered)

    @classmethod
    def _collect_operations(cls, ordered: list) -> None:
        for base in cls.__bases__:
            if issubclass(base, Capability) and base is not Capability:
                base._collect_operations(ordered)
        for name in cls.__dict__.get("_declared_operations", ()):
            if name not in ordered:
                ordered.append(name)

    @classmethod
    def capability_name(cls) -> str:
        """Human readable name used in logs and reports."""
        return cls.__name__
