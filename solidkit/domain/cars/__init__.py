"""Cars domain - Single Responsibility and Open/Closed lessons."""

from .car import Car, CarBrochure, CarFactory
from .ports import (
    CarBlueprint,
    CarRepository,
    DealershipRepository,
    GarageRepository,
    PickupBlueprint,
    SedanBlueprint,
    SuvBlueprint,
)
from .services import CarAssembler, CarCreationService, CarManager, TaggedCarAssembler

__all__ = [
    "Car",
    "CarFactory",
    "CarBrochure",
    "CarRepository",
    "GarageRepository",
    "DealershipRepository",
    "CarBlueprint",
    "SedanBlueprint",
    "SuvBlueprint",
    "PickupBlueprint",
    "CarManager",
    "CarCreationService",
    "TaggedCarAssembler",
    "CarAssembler",
]
