"""Conformance checks for capabilities, variants and consumers."""

from .inspection import (
    RULE_MIXED_RESPONSIBILITIES,
    RULE_NO_OP,
    RULE_SELF_CONSTRUCTION,
    RULE_TAG_BRANCHING,
    RULE_TYPE_BRANCHING,
    Violation,
    find_mixed_responsibilities,
    find_no_op_operations,
    find_self_construction,
)
from .recording import CallRecord, RecordingProxy
from .substitution import (
    FailFastReport,
    SubstitutabilityReport,
    VariantRun,
    check_fail_fast,
    check_substitutability,
)

__all__ = [
    "CallRecord",
    "RecordingProxy",
    "Violation",
    "find_no_op_operations",
    "find_self_construction",
    "find_mixed_responsibilities",
    "RULE_NO_OP",
    "RULE_SELF_CONSTRUCTION",
    "RULE_TYPE_BRANCHING",
    "RULE_TAG_BRANCHING",
    "RULE_MIXED_RESPONSIBILITIES",
    "VariantRun",
    "SubstitutabilityReport",
    "FailFastReport",
    "check_substitutability",
    "check_fail_fast",
]
