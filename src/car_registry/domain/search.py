"""
Search pipeline over an owner-scoped car collection: filter, sort, paginate.

Every function takes the full candidate collection (already scoped to one
owner by the caller) and returns a new list; the input is never mutated. An
empty collection always yields an empty result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from car_registry.domain.car import Car, is_blank
from car_registry.domain.classification import is_new, is_vintage
from car_registry.domain.criteria import (
    AdvancedSearchCriteria,
    CarSearchCriteria,
    Paging,
    StorageCriteria,
)
from car_registry.domain.predicates import (
    contains_ignore_case,
    equals_ignore_case,
    matches_advanced_criteria,
    matches_general_term,
    matches_plate,
    matches_request_filters,
    matches_storage_filters,
    matches_year,
    matches_year_range,
)
from car_registry.domain.sorting import (
    SortSpec,
    apply_sort,
    resolve_sort_field,
    sort_by_order,
    sort_cars,
)


@dataclass(frozen=True, slots=True)
class Page:
    """One slice of an ordered result plus the metadata to walk the rest."""

    content: list[Car]
    page: int
    size: int
    total_elements: int
    sorted_by: str | None = None
    sort_direction: str | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size > 0 else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def is_sorted(self) -> bool:
        return self.sorted_by is not None


class SearchStrategy(str, Enum):
    TERM = "term"
    FILTERS = "filters"
    ALL = "all"


def filter_cars(cars: Iterable[Car], predicate: Callable[[Car], bool]) -> list[Car]:
    return [car for car in cars if predicate(car)]


# ==============================================================================
# Field-specific searches (input order kept)
# ==============================================================================


def search_by_plate_number(cars: Iterable[Car], plate_number: str | None) -> list[Car]:
    # A blank plate is not a wildcard here: it cannot identify a car
    if is_blank(plate_number):
        return []
    return filter_cars(cars, lambda car: matches_plate(car, plate_number))


def search_by_brand(cars: Iterable[Car], brand: str | None) -> list[Car]:
    return filter_cars(cars, lambda car: contains_ignore_case(car.brand, brand))


def search_by_model(cars: Iterable[Car], model: str | None) -> list[Car]:
    return filter_cars(cars, lambda car: contains_ignore_case(car.model, model))


def filter_by_color(cars: Iterable[Car], color: str | None) -> list[Car]:
    return filter_cars(cars, lambda car: equals_ignore_case(car.color, color))


def filter_by_year(cars: Iterable[Car], year: int | None) -> list[Car]:
    return filter_cars(cars, lambda car: matches_year(car, year))


def filter_by_year_range(
    cars: Iterable[Car], min_year: int | None, max_year: int | None
) -> list[Car]:
    """Cars without a year never fall inside an explicit range on this path."""
    return filter_cars(cars, lambda car: matches_year_range(car, min_year, max_year))


def general_search(cars: Iterable[Car], term: str | None) -> list[Car]:
    """Substring match of term against brand, model or color."""
    return filter_cars(cars, lambda car: matches_general_term(car, term))


def vintage_cars(cars: Iterable[Car], today_year: int | None = None) -> list[Car]:
    return filter_cars(cars, lambda car: is_vintage(car.year, today_year))


def new_cars(cars: Iterable[Car], today_year: int | None = None) -> list[Car]:
    return filter_cars(cars, lambda car: is_new(car.year, today_year))


def cars_with_photo(cars: Iterable[Car]) -> list[Car]:
    return filter_cars(cars, lambda car: car.has_photo)


def cars_without_photo(cars: Iterable[Car]) -> list[Car]:
    return filter_cars(cars, lambda car: not car.has_photo)


# ==============================================================================
# Composite searches
# ==============================================================================


def advanced_search(cars: Sequence[Car], criteria: AdvancedSearchCriteria | None) -> list[Car]:
    """AND of all advanced constraints, then the optional SortOrder."""
    if criteria is None:
        return list(cars)

    if criteria.is_empty():
        results = list(cars)
    else:
        results = filter_cars(cars, lambda car: matches_advanced_criteria(car, criteria))

    if criteria.sort_order is not None:
        results = sort_by_order(results, criteria.sort_order)

    return results


def search_cars(
    cars: Sequence[Car],
    criteria: CarSearchCriteria | None,
    today_year: int | None = None,
) -> list[Car]:
    """
    Unified search for a search request.

    Without any filter the whole collection is returned in the requested
    order. Otherwise the general term (if any) narrows the base set, the
    structured filters are ANDed on top, and the result is sorted.
    """
    criteria = criteria or CarSearchCriteria()
    field = resolve_sort_field(criteria.sort_by)
    descending = criteria.is_sorting_descending()

    if not criteria.has_any_filter():
        return sort_cars(cars, field, descending)

    if criteria.has_search_term():
        base = general_search(cars, criteria.search_term)
    else:
        base = list(cars)

    results = filter_cars(base, lambda car: matches_request_filters(car, criteria, today_year))
    return sort_cars(results, field, descending)


# ==============================================================================
# Pagination
# ==============================================================================


def select_strategy(criteria: StorageCriteria) -> SearchStrategy:
    if criteria.has_search_term():
        return SearchStrategy.TERM
    if criteria.has_filters():
        return SearchStrategy.FILTERS
    return SearchStrategy.ALL


def build_sort_spec(sort_by: str | None, sort_direction: str | None) -> SortSpec | None:
    """No sort field means unsorted: results keep the collection's natural order."""
    if is_blank(sort_by):
        return None
    return SortSpec.of(sort_by, sort_direction)


def paginate(cars: Sequence[Car], paging: Paging, sort: SortSpec | None = None) -> Page:
    ordered = apply_sort(cars, sort) if sort is not None else list(cars)
    start = paging.offset
    end = start + paging.size

    return Page(
        content=ordered[start:end],
        page=paging.page,
        size=paging.size,
        total_elements=len(ordered),
        sorted_by=sort.field.value if sort is not None else None,
        sort_direction=sort.direction if sort is not None else None,
    )


def search_paginated(
    cars: Sequence[Car],
    criteria: StorageCriteria | None,
    paging: Paging,
    sort_by: str | None = None,
    sort_direction: str | None = None,
) -> Page:
    """
    Filter with one of three strategies, then sort and slice.

    Equivalent to what a storage backend would push down: a search term
    ignores the structured filters, structured filters use exact matching and
    reject cars without a year when a year range is given.
    """
    criteria = criteria or StorageCriteria.empty()
    paging = paging.normalized()
    sort = build_sort_spec(sort_by, sort_direction)

    strategy = select_strategy(criteria)
    if strategy is SearchStrategy.TERM:
        matches = general_search(cars, criteria.search_term)
    elif strategy is SearchStrategy.FILTERS:
        matches = filter_cars(cars, lambda car: matches_storage_filters(car, criteria))
    else:
        matches = list(cars)

    return paginate(matches, paging, sort)
