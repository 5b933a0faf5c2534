from __future__ import annotations

from car_registry.domain.car import Car
from car_registry.ports.car_repository import CarRepository


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - find_by_user_id returns newest first; cars without a creation time go
      last, in insertion order
    - Plate lookups are case-insensitive
    - Returns copies of its internal list, never the list itself
    """

    def __init__(self, cars: list[Car]) -> None:
        self._cars = list(cars)

    def find_by_user_id(self, user_id: int) -> list[Car]:
        owned = [car for car in self._cars if car.user_id == user_id]
        dated = [car for car in owned if car.created_at is not None]
        undated = [car for car in owned if car.created_at is None]

        dated.sort(key=lambda car: car.created_at, reverse=True)
        return dated + undated

    def find_by_plate_number(self, plate_number: str) -> Car | None:
        wanted = plate_number.strip().upper()
        return next(
            (car for car in self._cars if car.plate_number and car.plate_number.upper() == wanted),
            None,
        )

    def find_by_id(self, car_id: int) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)

    def exists_by_plate_number(self, plate_number: str) -> bool:
        return self.find_by_plate_number(plate_number) is not None

    def exists_by_plate_number_for_other_user(self, plate_number: str, user_id: int) -> bool:
        wanted = plate_number.strip().upper()
        return any(
            car.plate_number is not None
            and car.plate_number.upper() == wanted
            and car.user_id != user_id
            for car in self._cars
        )
