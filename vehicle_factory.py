# vehicle_factory.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from validators import Validator

logger = logging.getLogger(__name__)


class Vehicle(ABC):
    """Product interface: everything the factory hands out."""

    def __init__(self, horsepower: int) -> None:
        self._horsepower = Validator.positive_int("horsepower", horsepower)

    @property
    @abstractmethod
    def type(self) -> str:
        raise NotImplementedError

    @property
    def horsepower(self) -> int:
        return self._horsepower

    def __str__(self) -> str:
        return f"Type: {self.type}, Horsepower: {self.horsepower}"


class Car(Vehicle):
    @property
    def type(self) -> str:
        return "Car"


class Truck(Vehicle):
    @property
    def type(self) -> str:
        return "Truck"


class VehicleFactory:
    _products: dict[str, type[Vehicle]] = {"car": Car, "truck": Truck}

    @staticmethod
    def kinds() -> tuple[str, ...]:
        return tuple(VehicleFactory._products)

    @staticmethod
    def get_vehicle(kind: str, horsepower: int) -> Vehicle:
        """
        Builds a vehicle by kind name ("car" / "truck", any case).
        Unknown kinds raise ValueError.
        """
        key = Validator.one_of("type", kind, VehicleFactory.kinds())
        vehicle = VehicleFactory._products[key](horsepower)
        logger.debug("Factory built %s", vehicle)
        return vehicle
