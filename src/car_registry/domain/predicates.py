"""
Single-constraint predicates over one car.

Every string constraint is compared case-insensitively after trimming, and a
blank constraint matches everything. Two string modes coexist and are not
interchangeable:
- contains_ignore_case: simple search-by-field, general/quick search, and
  brand/model on the advanced path
- equals_ignore_case: the structured filters of a search request, color and
  plate everywhere
"""

from __future__ import annotations

from car_registry.domain.car import Car, is_blank
from car_registry.domain.classification import is_new, is_vintage
from car_registry.domain.criteria import AdvancedSearchCriteria, CarSearchCriteria, StorageCriteria


def contains_ignore_case(value: str | None, constraint: str | None) -> bool:
    if is_blank(constraint):
        return True
    return value is not None and constraint.strip().lower() in value.lower()


def equals_ignore_case(value: str | None, constraint: str | None) -> bool:
    if is_blank(constraint):
        return True
    return value is not None and value.lower() == constraint.strip().lower()


def matches_year(car: Car, year: int | None) -> bool:
    return year is None or (car.year is not None and car.year == year)


def matches_year_range(
    car: Car,
    min_year: int | None,
    max_year: int | None,
    include_unknown: bool = False,
) -> bool:
    """
    Inclusive, open-ended year range.

    include_unknown decides whether a car without a year passes a range it
    cannot be placed in. The advanced and search-request paths pass it; the
    field-specific range filter and storage pushdown do not.
    """
    if min_year is None and max_year is None:
        return True
    if car.year is None:
        return include_unknown

    return (min_year is None or car.year >= min_year) and (max_year is None or car.year <= max_year)


def matches_plate(car: Car, plate_number: str | None) -> bool:
    return equals_ignore_case(car.plate_number, plate_number)


def matches_general_term(car: Car, term: str | None) -> bool:
    if is_blank(term):
        return True
    return any(
        contains_ignore_case(value, term) for value in (car.brand, car.model, car.color)
    )


def matches_vintage(car: Car, wanted: bool | None, today_year: int | None = None) -> bool:
    return wanted is None or wanted == is_vintage(car.year, today_year)


def matches_new(car: Car, wanted: bool | None, today_year: int | None = None) -> bool:
    return wanted is None or wanted == is_new(car.year, today_year)


def matches_photo(car: Car, wanted: bool | None) -> bool:
    return wanted is None or wanted == car.has_photo


def matches_advanced_criteria(car: Car, criteria: AdvancedSearchCriteria) -> bool:
    return (
        contains_ignore_case(car.brand, criteria.brand)
        and contains_ignore_case(car.model, criteria.model)
        and matches_year(car, criteria.year)
        and matches_year_range(car, criteria.min_year, criteria.max_year, include_unknown=True)
        and equals_ignore_case(car.color, criteria.color)
        and matches_plate(car, criteria.plate_number)
        and matches_general_term(car, criteria.general_search_term)
    )


def matches_request_filters(
    car: Car,
    criteria: CarSearchCriteria,
    today_year: int | None = None,
) -> bool:
    """Structured filters of a search request; the search term is applied separately."""
    return (
        equals_ignore_case(car.brand, criteria.brand)
        and equals_ignore_case(car.model, criteria.model)
        and matches_year(car, criteria.year)
        and matches_year_range(car, criteria.min_year, criteria.max_year, include_unknown=True)
        and equals_ignore_case(car.color, criteria.color)
        and matches_plate(car, criteria.plate_number)
        and matches_vintage(car, criteria.is_vintage, today_year)
        and matches_new(car, criteria.is_new, today_year)
        and matches_photo(car, criteria.has_photo)
    )


def matches_storage_filters(car: Car, criteria: StorageCriteria) -> bool:
    return (
        equals_ignore_case(car.brand, criteria.brand)
        and equals_ignore_case(car.model, criteria.model)
        and matches_year(car, criteria.year)
        and equals_ignore_case(car.color, criteria.color)
        and matches_year_range(car, criteria.min_year, criteria.max_year)
    )
