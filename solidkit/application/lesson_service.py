"""Lesson application service.

Lists and describes lessons, runs a lesson's consumer with a variant chosen
by name, and checks every lesson's problem and solution shapes against the
conformance rules.
"""
import inspect
from typing import Any, Dict, List, Optional, Sequence

from solidkit.application.catalog import Lesson, Principle, all_lessons, get_lesson
from solidkit.application.conformance import (
    Violation,
    check_fail_fast,
    check_substitutability,
    find_mixed_responsibilities,
    find_no_op_operations,
    find_self_construction,
)
from solidkit.config.schemas import AppConfig
from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import ValidationError
from solidkit.infrastructure.logging.logger import get_logger
from solidkit.infrastructure.registry.variant_registry import VariantRegistry


def inspect_subject(subject: type, principle: Optional[str] = None) -> List[Violation]:
    """
    Run the static rules that apply to a class.

    Concrete capability variants are checked for no-op operations; every
    other class is checked for self-construction, type and tag branching,
    and mixed responsibilities.
    """
    if isinstance(subject, type) and issubclass(subject, Capability):
        if inspect.isabstract(subject):
            return []
        return find_no_op_operations(subject, principle)
    return find_self_construction(subject, principle) + find_mixed_responsibilities(subject, principle)


class LessonService:
    """Application service for the lesson catalog."""

    def __init__(self, registry: VariantRegistry, config: AppConfig):
        self.registry = registry
        self.config = config
        self.logger = get_logger(__name__)

    def list_lessons(self) -> List[Dict[str, Any]]:
        """List every lesson with its default variant."""
        return [
            {
                "principle": lesson.principle.value,
                "title": lesson.title,
                "contract": lesson.contract.__name__,
                "consumer": lesson.consumer.__name__,
                "variant": self._default_variant(lesson),
            }
            for lesson in all_lessons()
        ]

    def describe(self, principle: Principle) -> Dict[str, Any]:
        """Describe one lesson in full."""
        lesson = get_lesson(principle)
        return {
            "principle": lesson.principle.value,
            "title": lesson.title,
            "summary": lesson.summary,
            "problem": [subject.__name__ for subject in lesson.problem_subjects],
            "contract": lesson.contract.__name__,
            "operations": list(lesson.contract.operations()),
            "consumer": lesson.consumer.__name__,
            "variants": self.registry.get_registered_names(lesson.contract),
            "default_variant": self._default_variant(lesson),
            "sample_inputs": list(lesson.sample_inputs),
        }

    def run(self, principle: Principle, variant: Optional[str] = None,
            inputs: Sequence[str] = ()) -> Dict[str, Any]:
        """
        Run a lesson's consumer with a variant chosen by name.

        Args:
            principle: Lesson to run
            variant: Registered variant name, defaults to the configured one
            inputs: String inputs for the consumer, defaults to the lesson's samples

        Returns:
            The variant used, the inputs and the effects produced

        Raises:
            UnsupportedVariantError: If the variant is not registered
            ValidationError: If the inputs cannot be parsed
            OperationFailedError: If the consumer's sequence fails
        """
        lesson = get_lesson(principle)
        variant_name = variant or self._default_variant(lesson)
        implementation = self._create_variant(lesson, variant_name)
        inputs = list(inputs) or list(lesson.sample_inputs)

        try:
            effects = lesson.demonstrate(implementation, inputs)
        except (ValueError, IndexError) as e:
            raise ValidationError(f"Invalid inputs for {principle.value}: {inputs}", str(e)) from e

        self.logger.info(f"Ran {principle.value} with variant '{variant_name}'")
        return {
            "principle": principle.value,
            "variant": variant_name,
            "inputs": inputs,
            "effects": effects,
        }

    def check(self, principle: Optional[Principle] = None) -> Dict[str, Any]:
        """
        Check lessons against the conformance rules.

        A lesson passes when every problem subject is flagged, the solution
        consumer and variants are clean, all variants are driven through the
        same operations with distinct effects, and a failure in the first
        operation stops the sequence.

        Args:
            principle: Lesson to check, all lessons if None

        Returns:
            Per-lesson results and an overall ``passed`` flag
        """
        lessons = [get_lesson(principle)] if principle else all_lessons()
        results = [self._check_lesson(lesson) for lesson in lessons]
        return {
            "passed": all(result["passed"] for result in results),
            "lessons": results,
        }

    def _check_lesson(self, lesson: Lesson) -> Dict[str, Any]:
        code = lesson.principle.value
        variants = {
            name: self._create_variant(lesson, name)
            for name in self.registry.get_registered_names(lesson.contract)
        }

        problem_violations = {
            subject.__name__: inspect_subject(subject, code) for subject in lesson.problem_subjects
        }
        solution_subjects = [lesson.consumer] + sorted(
            {type(variant) for variant in variants.values()}, key=lambda cls: cls.__name__
        )
        solution_violations = []
        for subject in solution_subjects:
            solution_violations.extend(inspect_subject(subject, code))

        inputs = list(lesson.sample_inputs)
        substitution = check_substitutability(
            lesson.consumer, variants, lambda consumer: lesson.drive(consumer, inputs)
        )

        first_operation = lesson.contract.operations()[0]
        fail_fast = check_fail_fast(
            lesson.consumer,
            next(iter(variants.values())),
            lambda consumer: lesson.drive(consumer, inputs),
            first_operation,
        )

        problem_flagged = all(problem_violations.values())
        passed = (
            problem_flagged
            and not solution_violations
            and substitution.consistent
            and substitution.distinct_effects
            and fail_fast.passed
        )
        if not passed:
            self.logger.warning(f"Lesson {code} failed its conformance check")

        return {
            "principle": code,
            "title": lesson.title,
            "passed": passed,
            "problem_violations": [
                violation.to_dict() for found in problem_violations.values() for violation in found
            ],
            "problem_flagged": problem_flagged,
            "solution_violations": [violation.to_dict() for violation in solution_violations],
            "substitutability": substitution.to_dict(),
            "fail_fast": fail_fast.to_dict(),
        }

    def _default_variant(self, lesson: Lesson) -> str:
        return getattr(self.config.wiring, lesson.wiring_field)

    def _create_variant(self, lesson: Lesson, name: str) -> Capability:
        return self.registry.create_variant(
            lesson.contract, name, self.config.variant_options(name)
        )
