"""Lesson catalog - one lesson per SOLID principle.

Each lesson names the problem classes that break its principle, the
contract and consumer of the solution, the configuration field that picks
the solution's variant, and how to drive the consumer from plain string
inputs.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple, Type

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.consumer import Consumer
from solidkit.domain.cars import (
    CarAssembler,
    CarBlueprint,
    CarCreationService,
    CarManager,
    CarRepository,
    TaggedCarAssembler,
)
from solidkit.domain.payments import PaymentProcessor, PaymentSource, RewardsMethod
from solidkit.domain.printing import BasicInkjet, Document, Printer, PrintJob
from solidkit.domain.users import RecordStore, TaggedUserCreator, UserCreator


class Principle(str, Enum):
    """The five SOLID principles."""
    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def display_name(self) -> str:
        return _TITLES[self]

    @classmethod
    def parse(cls, value: str) -> "Principle":
        """Parse a principle from its short code, case-insensitively."""
        try:
            return cls(value.lower())
        except ValueError as e:
            codes = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown principle '{value}', expected one of: {codes}") from e


_TITLES = {
    Principle.SRP: "Single Responsibility",
    Principle.OCP: "Open/Closed",
    Principle.LSP: "Liskov Substitution",
    Principle.ISP: "Interface Segregation",
    Principle.DIP: "Dependency Inversion",
}

Driver = Callable[[Consumer, Sequence[str]], Any]


@dataclass(frozen=True)
class Lesson:
    """One principle, its problem shape and its solution shape."""
    principle: Principle
    summary: str
    problem_subjects: Tuple[type, ...]
    contract: Type[Capability]
    consumer: Type[Consumer]
    wiring_field: str
    drive: Driver
    sample_inputs: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def title(self) -> str:
        return self.principle.display_name

    def demonstrate(self, variant: Capability, inputs: Sequence[str] = ()) -> Any:
        """Inject a variant into this lesson's consumer and drive it."""
        return self.drive(self.consumer(variant), list(inputs) or list(self.sample_inputs))


def _drive_car_creation(service: CarCreationService, inputs: Sequence[str]) -> List[str]:
    make, model, year = inputs[0], inputs[1], int(inputs[2])
    return list(service.create_car(make, model, year))


def _drive_car_assembly(assembler: CarAssembler, inputs: Sequence[str]) -> str:
    make, model, year = inputs[0], inputs[1], int(inputs[2])
    return assembler.build(make, model, year).describe()


def _drive_payment(processor: PaymentProcessor, inputs: Sequence[str]) -> List[str]:
    return processor.process(inputs[0])


def _drive_print_job(job: PrintJob, inputs: Sequence[str]) -> str:
    pages = int(inputs[1]) if len(inputs) > 1 else 1
    return job.submit(Document(title=inputs[0], pages=pages))


def _drive_user_creation(creator: UserCreator, inputs: Sequence[str]) -> str:
    return creator.create(inputs[0])


LESSONS: Dict[Principle, Lesson] = {
    Principle.SRP: Lesson(
        principle=Principle.SRP,
        summary=(
            "A class should have one reason to change. CarManager validates, "
            "builds, presents and stores cars at once; the solution gives each "
            "job its own class and lets CarCreationService only orchestrate."
        ),
        problem_subjects=(CarManager,),
        contract=CarRepository,
        consumer=CarCreationService,
        wiring_field="car_repository",
        drive=_drive_car_creation,
        sample_inputs=("Toyota", "Corolla", "2024"),
    ),
    Principle.OCP: Lesson(
        principle=Principle.OCP,
        summary=(
            "Open for extension, closed for modification. TaggedCarAssembler "
            "grows a branch for every body type; CarAssembler takes any "
            "CarBlueprint, so a new body type is a new variant, not an edit."
        ),
        problem_subjects=(TaggedCarAssembler,),
        contract=CarBlueprint,
        consumer=CarAssembler,
        wiring_field="car_blueprint",
        drive=_drive_car_assembly,
        sample_inputs=("Ford", "Ranger", "2023"),
    ),
    Principle.LSP: Lesson(
        principle=Principle.LSP,
        summary=(
            "Every variant must honour every operation of its contract. "
            "RewardsMethod cannot send anything to a payment gateway and does "
            "nothing instead; PaymentSource only asks for operations that both "
            "cards and points can really perform."
        ),
        problem_subjects=(RewardsMethod,),
        contract=PaymentSource,
        consumer=PaymentProcessor,
        wiring_field="payment_source",
        drive=_drive_payment,
        sample_inputs=("25.00",),
    ),
    Principle.ISP: Lesson(
        principle=Principle.ISP,
        summary=(
            "No variant should depend on operations it does not use. "
            "BasicInkjet has to pretend it scans and faxes; Printer, Scanner and "
            "Fax let each device declare only what it does."
        ),
        problem_subjects=(BasicInkjet,),
        contract=Printer,
        consumer=PrintJob,
        wiring_field="printer",
        drive=_drive_print_job,
        sample_inputs=("Quarterly report", "3"),
    ),
    Principle.DIP: Lesson(
        principle=Principle.DIP,
        summary=(
            "Depend on abstractions, not concretions. TaggedUserCreator picks "
            "and builds its own database from a string; UserCreator receives a "
            "RecordStore from the composition root."
        ),
        problem_subjects=(TaggedUserCreator,),
        contract=RecordStore,
        consumer=UserCreator,
        wiring_field="record_store",
        drive=_drive_user_creation,
        sample_inputs=("alice",),
    ),
}


def get_lesson(principle: Principle) -> Lesson:
    """Get the lesson for a principle."""
    return LESSONS[principle]


def all_lessons() -> List[Lesson]:
    """Get every lesson in S, O, L, I, D order."""
    return [LESSONS[principle] for principle in Principle]
