"""
Sort engine for car collections.

Two entry points share one comparator table:
- SortOrder, a closed set of field/direction pairs (advanced search)
- free-form field names plus a direction (search requests, paginated search)

Policy for both:
- string fields compare case-insensitively
- missing values always go last, in either direction
- the sort is stable, so ties keep their input order and re-sorting is a no-op
- an unknown or blank field name falls back to creation time, never an error
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from car_registry.domain.car import Car, is_blank


class SortField(str, Enum):
    BRAND = "brand"
    MODEL = "model"
    YEAR = "year"
    COLOR = "color"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortOrder(str, Enum):
    YEAR_ASC = "YEAR_ASC"
    YEAR_DESC = "YEAR_DESC"
    BRAND_ASC = "BRAND_ASC"
    BRAND_DESC = "BRAND_DESC"
    MODEL_ASC = "MODEL_ASC"
    MODEL_DESC = "MODEL_DESC"
    CREATED_ASC = "CREATED_ASC"
    CREATED_DESC = "CREATED_DESC"


def _text(attribute: str) -> Callable[[Car], Any]:
    def key(car: Car) -> str | None:
        value = getattr(car, attribute)
        return value.lower() if value is not None else None

    return key


def _plain(attribute: str) -> Callable[[Car], Any]:
    def key(car: Car) -> Any:
        return getattr(car, attribute)

    return key


_SORT_KEYS: dict[SortField, Callable[[Car], Any]] = {
    SortField.BRAND: _text("brand"),
    SortField.MODEL: _text("model"),
    SortField.YEAR: _plain("year"),
    SortField.COLOR: _text("color"),
    SortField.CREATED_AT: _plain("created_at"),
    SortField.UPDATED_AT: _plain("updated_at"),
}

# field, descending
_SORT_ORDERS: dict[SortOrder, tuple[SortField, bool]] = {
    SortOrder.YEAR_ASC: (SortField.YEAR, False),
    SortOrder.YEAR_DESC: (SortField.YEAR, True),
    SortOrder.BRAND_ASC: (SortField.BRAND, False),
    SortOrder.BRAND_DESC: (SortField.BRAND, True),
    SortOrder.MODEL_ASC: (SortField.MODEL, False),
    SortOrder.MODEL_DESC: (SortField.MODEL, True),
    SortOrder.CREATED_ASC: (SortField.CREATED_AT, False),
    SortOrder.CREATED_DESC: (SortField.CREATED_AT, True),
}

_FIELDS_BY_NAME: dict[str, SortField] = {field.value.lower(): field for field in SortField}


def resolve_sort_field(name: str | None) -> SortField:
    """Map a free-form field name to a SortField, defaulting to creation time."""
    if is_blank(name):
        return SortField.CREATED_AT
    return _FIELDS_BY_NAME.get(name.strip().lower(), SortField.CREATED_AT)


def is_descending(direction: str | None) -> bool:
    return direction is not None and direction.strip().lower() == "desc"


@dataclass(frozen=True, slots=True)
class SortSpec:
    field: SortField = SortField.CREATED_AT
    descending: bool = True

    @property
    def direction(self) -> str:
        return "desc" if self.descending else "asc"

    @classmethod
    def of(cls, sort_by: str | None, direction: str | None) -> SortSpec:
        return cls(field=resolve_sort_field(sort_by), descending=is_descending(direction))

    @classmethod
    def from_sort_order(cls, sort_order: SortOrder) -> SortSpec:
        field, descending = _SORT_ORDERS[sort_order]
        return cls(field=field, descending=descending)


def sort_cars(cars: Iterable[Car], field: SortField, descending: bool = False) -> list[Car]:
    key = _SORT_KEYS[field]

    present: list[Car] = []
    missing: list[Car] = []
    for car in cars:
        (missing if key(car) is None else present).append(car)

    # reverse=True keeps equal keys in input order
    present.sort(key=key, reverse=descending)
    return present + missing


def sort_by_order(cars: Iterable[Car], sort_order: SortOrder) -> list[Car]:
    field, descending = _SORT_ORDERS[sort_order]
    return sort_cars(cars, field, descending)


def sort_by_name(cars: Iterable[Car], sort_by: str | None, ascending: bool) -> list[Car]:
    return sort_cars(cars, resolve_sort_field(sort_by), descending=not ascending)


def apply_sort(cars: Iterable[Car], spec: SortSpec) -> list[Car]:
    return sort_cars(cars, spec.field, spec.descending)
