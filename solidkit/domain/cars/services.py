"""Car services - Single Responsibility and Open/Closed lessons.

CarManager validates, builds, presents and stores cars in one class, so a
change to any of those concerns touches the same code. CarCreationService
only orchestrates: CarFactory validates and builds, CarBrochure presents,
and an injected CarRepository stores.

TaggedCarAssembler switches on a body-type string, so a new body type means
editing it. CarAssembler is handed a CarBlueprint and never changes when a
new blueprint appears.
"""
from typing import List, Optional, Tuple

from solidkit.domain.base.consumer import Consumer
from solidkit.domain.base.exceptions import OperationFailedError, ValidationError
from solidkit.domain.cars.car import Car, CarBrochure, CarFactory
from solidkit.domain.cars.ports import CarBlueprint, CarRepository


class CarManager:
    """Does everything a car needs, all at once."""

    def __init__(self):
        self.stored: List[str] = []

    def create_car(self, make: str, model: str, year: int) -> str:
        if not make or not model:
            raise ValueError("make and model are required")
        if year < 1886:
            raise ValueError("cars did not exist before 1886")
        car = Car(make=make, model=model, year=year, body_type="sedan")
        line = f"Brand new {car.describe()}, ready for a test drive"
        self.stored.append(f"garage:{car.describe()}")
        return line


class CarCreationService(Consumer):
    """Creates cars and stores them through an injected CarRepository."""

    requires = CarRepository

    def __init__(self, repository: CarRepository,
                 factory: Optional[CarFactory] = None,
                 brochure: Optional[CarBrochure] = None):
        super().__init__(repository)
        self.factory = factory or CarFactory()
        self.brochure = brochure or CarBrochure()

    def create_car(self, make: str, model: str, year: int,
                   body_type: str = "sedan") -> Tuple[str, str]:
        """
        Create and store a car.

        Returns:
            Brochure line and description of the simulated write

        Raises:
            OperationFailedError: If the car details are invalid or storage fails
        """
        try:
            car = self.factory.create(make, model, year, body_type)
        except ValidationError as e:
            raise OperationFailedError("create_car", f"{e}: {e.details}") from e

        effects = self._run([("save", (car,))])
        return self.brochure.render(car), effects[0]


class TaggedCarAssembler:
    """Assembles cars by switching on a body-type string."""

    def assemble(self, body_type: str, make: str, model: str, year: int) -> Car:
        if body_type == "sedan":
            return Car(make=make, model=model, year=year, body_type="sedan")
        elif body_type == "suv":
            return Car(make=make, model=model, year=year, body_type="suv")
        else:
            raise ValueError(f"Unknown body type: {body_type}")


class CarAssembler(Consumer):
    """Assembles cars with whichever blueprint it was given."""

    requires = CarBlueprint

    def __init__(self, blueprint: CarBlueprint):
        super().__init__(blueprint)

    def build(self, make: str, model: str, year: int) -> Car:
        return self._run([("assemble", (make, model, year))])[0]
