"""Car capability contracts and their variants."""
from abc import abstractmethod
from typing import Optional

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import OperationFailedError, ValidationError
from solidkit.domain.cars.car import Car, CarFactory


class CarRepository(Capability):
    """Port for keeping created cars somewhere."""

    @abstractmethod
    def save(self, car: Car) -> str:
        """Store a car and describe the simulated write."""


class GarageRepository(CarRepository):
    """Parks cars in the owner's garage."""

    def save(self, car: Car) -> str:
        return f"garage:{car.describe()}"


class DealershipRepository(CarRepository):
    """Lists cars on a dealership floor."""

    def save(self, car: Car) -> str:
        return f"dealership:{car.describe()}"


class CarBlueprint(Capability):
    """Port for assembling one kind of car body."""

    body_type = ""

    @abstractmethod
    def assemble(self, make: str, model: str, year: int) -> Car:
        """Assemble a car of this blueprint's body type.

        Raises:
            OperationFailedError: If the car details are invalid
        """


class _FactoryBlueprint(CarBlueprint):
    """Shared assembly through CarFactory; subclasses only name the body."""

    def __init__(self, factory: Optional[CarFactory] = None):
        self.factory = factory or CarFactory()

    def assemble(self, make: str, model: str, year: int) -> Car:
        try:
            return self.factory.create(make, model, year, self.body_type)
        except ValidationError as e:
            raise OperationFailedError("assemble", f"{e}: {e.details}") from e


class SedanBlueprint(_FactoryBlueprint):
    body_type = "sedan"


class SuvBlueprint(_FactoryBlueprint):
    body_type = "suv"


class PickupBlueprint(_FactoryBlueprint):
    body_type = "pickup"
