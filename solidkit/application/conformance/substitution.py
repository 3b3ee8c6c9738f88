"""Behavioural checks: substitutability, fail-fast propagation, distinct effects."""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from solidkit.application.conformance.recording import CallRecord, RecordingProxy
from solidkit.domain.base.capability import Capability
from solidkit.domain.base.consumer import Consumer
from solidkit.domain.base.exceptions import OperationFailedError
from solidkit.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

ConsumerFactory = Callable[[Capability], Consumer]
Driver = Callable[[Consumer], Any]


def _is_empty_effect(result: Any) -> bool:
    """True for a missing effect, or a sequence with any missing element."""
    if isinstance(result, (list, tuple)):
        return not result or any(_is_empty_effect(item) for item in result)
    return result is None or result == ""


@dataclass
class VariantRun:
    """Outcome of driving a consumer built around one variant."""
    variant: str
    calls: List[CallRecord] = field(default_factory=list)
    result: Any = None
    error: Optional[OperationFailedError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variant": self.variant,
            "calls": [call.to_dict() for call in self.calls],
            "result": self.result if self.error is None else None,
            "error": str(self.error) if self.error else None,
        }


@dataclass
class SubstitutabilityReport:
    """Call traces of one consumer driven with every variant of a contract."""
    runs: List[VariantRun] = field(default_factory=list)

    @property
    def consistent(self) -> bool:
        """True when every variant saw the same operations with the same arguments."""
        if not self.runs:
            return True
        reference = self.runs[0].calls
        return all(run.calls == reference for run in self.runs[1:])

    @property
    def distinct_effects(self) -> bool:
        """True when every successful run produced its own, non-empty effect."""
        effects = [repr(run.result) for run in self.runs if run.succeeded]
        if any(run.succeeded and _is_empty_effect(run.result) for run in self.runs):
            return False
        return len(effects) == len(set(effects))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "consistent": self.consistent,
            "distinct_effects": self.distinct_effects,
            "runs": [run.to_dict() for run in self.runs],
        }


@dataclass
class FailFastReport:
    """Outcome of forcing one operation of a consumer's sequence to fail."""
    failing_operation: str
    calls: List[CallRecord] = field(default_factory=list)
    surfaced: Optional[OperationFailedError] = None

    @property
    def error_surfaced(self) -> bool:
        return self.surfaced is not None and self.surfaced.operation == self.failing_operation

    @property
    def stopped_at_failure(self) -> bool:
        names = [call.operation for call in self.calls]
        return bool(names) and names[-1] == self.failing_operation \
            and names.count(self.failing_operation) == 1

    @property
    def passed(self) -> bool:
        return self.error_surfaced and self.stopped_at_failure

    def to_dict(self) -> Dict[str, Any]:
        return {
            "failing_operation": self.failing_operation,
            "calls": [call.operation for call in self.calls],
            "error": str(self.surfaced) if self.surfaced else None,
            "passed": self.passed,
        }


def check_substitutability(consumer_factory: ConsumerFactory,
                           variants: Mapping[str, Capability],
                           drive: Driver) -> SubstitutabilityReport:
    """
    Drive the same consumer with every variant and compare what it invoked.

    Args:
        consumer_factory: Builds a consumer around an injected capability
        variants: Variants of one contract, keyed by name
        drive: Calls the consumer with fixed inputs

    Returns:
        Report with one run per variant; an OperationFailedError raised while
        driving is recorded on the run
    """
    report = SubstitutabilityReport()

    for name, variant in variants.items():
        proxy = RecordingProxy(variant)
        consumer = consumer_factory(proxy)
        run = VariantRun(variant=name, calls=proxy.calls)
        try:
            run.result = drive(consumer)
        except OperationFailedError as e:
            run.error = e
        report.runs.append(run)
        logger.debug(f"Drove {type(consumer).__name__} with {name}: {proxy.operation_names()}")

    if not report.consistent:
        logger.info("Variants were driven through different operation sequences")
    return report


def check_fail_fast(consumer_factory: ConsumerFactory,
                    variant: Capability,
                    drive: Driver,
                    failing_operation: str) -> FailFastReport:
    """
    Force one operation to fail and check the consumer stops there.

    Args:
        consumer_factory: Builds a consumer around an injected capability
        variant: Variant to wrap
        drive: Calls the consumer with fixed inputs
        failing_operation: Operation that raises OperationFailedError

    Returns:
        Report describing which operations ran and what reached the caller
    """
    proxy = RecordingProxy(variant, fail_on=failing_operation)
    consumer = consumer_factory(proxy)
    report = FailFastReport(failing_operation=failing_operation, calls=proxy.calls)

    try:
        drive(consumer)
    except OperationFailedError as e:
        report.surfaced = e

    return report
