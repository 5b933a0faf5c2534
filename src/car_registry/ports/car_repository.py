from __future__ import annotations

from abc import ABC, abstractmethod

from car_registry.domain.car import Car


class CarRepository(ABC):
    """
    Port for car data access.

    The search engine only reads: it asks for an owner's whole collection and
    does its own filtering, sorting and paging in memory. Point lookups and
    plate checks go straight to the repository.

    Contract (Preconditions):
        - user_id is validated by the caller (UseCase)
        - plate numbers are passed already trimmed
    """

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Car]:
        """
        Return every car owned by user_id.

        Natural order is newest first (creation time descending). Returns an
        empty list when the owner has no cars.
        """
        ...

    @abstractmethod
    def find_by_plate_number(self, plate_number: str) -> Car | None:
        """Return the car with this plate (case-insensitive), or None."""
        ...

    @abstractmethod
    def find_by_id(self, car_id: int) -> Car | None:
        """Return the car with this id, or None."""
        ...

    @abstractmethod
    def exists_by_plate_number(self, plate_number: str) -> bool:
        """True if any owner has a car with this plate."""
        ...

    @abstractmethod
    def exists_by_plate_number_for_other_user(self, plate_number: str, user_id: int) -> bool:
        """True if an owner other than user_id has a car with this plate."""
        ...
