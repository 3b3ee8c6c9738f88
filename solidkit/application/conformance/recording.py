"""Recording proxy for observing the operations a consumer invokes."""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import OperationFailedError


@dataclass(frozen=True)
class CallRecord:
    """One contract operation invocation."""
    operation: str
    args: Tuple[Any, ...] = ()
    kwargs: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.operation,
            "args": [str(arg) for arg in self.args],
            "kwargs": {key: str(value) for key, value in self.kwargs.items()},
        }


class RecordingProxy:
    """
    Wraps a variant and records every contract operation called on it.

    The proxy reports the wrapped variant's class as its own, so consumers
    accept it wherever they would accept the variant. Attributes that are
    not contract operations are passed through unrecorded.

    Args:
        wrapped: Variant to observe
        fail_on: Optional operation name that raises OperationFailedError
            instead of reaching the variant
    """

    def __init__(self, wrapped: Capability, fail_on: Optional[str] = None):
        self._wrapped = wrapped
        self._operations = frozenset(type(wrapped).operations())
        self._fail_on = fail_on
        self.calls: List[CallRecord] = []

    @property
    def __class__(self):
        return type(self._wrapped)

    @property
    def wrapped(self) -> Capability:
        return self._wrapped

    def __getattr__(self, name: str) -> Any:
        if name in ("_wrapped", "_operations", "_fail_on", "calls"):
            raise AttributeError(name)
        attribute = getattr(self._wrapped, name)
        if name not in self._operations:
            return attribute

        def recorded(*args, **kwargs):
            self.calls.append(CallRecord(name, tuple(args), dict(kwargs)))
            if name == self._fail_on:
                raise OperationFailedError(name, "forced failure")
            return attribute(*args, **kwargs)

        return recorded

    def operation_names(self) -> List[str]:
        """Names of the recorded operations, in call order."""
        return [call.operation for call in self.calls]

    def __repr__(self) -> str:
        return f"RecordingProxy({type(self._wrapped).__name__}, calls={len(self.calls)})"
