from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def is_blank(value: str | None) -> bool:
    """True when a string constraint is absent or whitespace-only."""
    return value is None or not value.strip()


@dataclass(frozen=True, eq=False)
class Car:
    """
    A car record owned by exactly one user.

    The plate number is the natural key: two records with the same plate are
    the same car, whatever their other fields say.
    """

    brand: str | None
    model: str | None
    year: int | None
    plate_number: str | None
    color: str | None
    user_id: int | None
    photo_url: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Car):
            return NotImplemented
        return self.plate_number is not None and self.plate_number == other.plate_number

    def __hash__(self) -> int:
        return hash(self.plate_number)

    @property
    def has_photo(self) -> bool:
        return not is_blank(self.photo_url)

    @property
    def full_description(self) -> str:
        return f"{self.brand} {self.model} {self.year}"
