"""Car value object and the single-purpose helpers around it."""
from pydantic import BaseModel, ConfigDict

from solidkit.domain.base.exceptions import ValidationError

FIRST_CAR_YEAR = 1886
LAST_CAR_YEAR = 2100


class Car(BaseModel):
    """Immutable car description."""
    model_config = ConfigDict(frozen=True)

    make: str
    model: str
    year: int
    body_type: str

    def describe(self) -> str:
        return f"{self.year} {self.make} {self.model} ({self.body_type})"


class CarFactory:
    """Builds valid Car objects. Knows nothing about storage or presentation."""

    def create(self, make: str, model: str, year: int, body_type: str) -> Car:
        """
        Create a car.

        Raises:
            ValidationError: If a name is blank or the year is out of range
        """
        errors = {}
        if not make or not make.strip():
            errors["make"] = "must not be blank"
        if not model or not model.strip():
            errors["model"] = "must not be blank"
        if not body_type or not body_type.strip():
            errors["body_type"] = "must not be blank"
        if not isinstance(year, int) or not FIRST_CAR_YEAR <= year <= LAST_CAR_YEAR:
            errors["year"] = f"must be between {FIRST_CAR_YEAR} and {LAST_CAR_YEAR}"

        if errors:
            raise ValidationError("Invalid car", errors)

        return Car(make=make.strip(), model=model.strip(), year=year, body_type=body_type.strip())


class CarBrochure:
    """Renders cars for people. Knows nothing about creation or storage."""

    def render(self, car: Car) -> str:
        return f"Brand new {car.describe()}, ready for a test drive"
