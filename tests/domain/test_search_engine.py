"""
Tests for the in-memory search pipeline.

Covers:
- Field-specific searches and their matching modes
- Advanced and unified search composition
- Paginated search strategies, sorting and page metadata
"""

from __future__ import annotations

from datetime import datetime

import pytest

from car_registry.domain import search
from car_registry.domain.car import Car
from car_registry.domain.criteria import (
    AdvancedSearchCriteria,
    CarSearchCriteria,
    Paging,
    StorageCriteria,
)
from car_registry.domain.search import Page, SearchStrategy
from car_registry.domain.sorting import SortOrder


def make_car(plate: str, **overrides: object) -> Car:
    fields: dict[str, object] = {
        "brand": "Toyota",
        "model": "Corolla",
        "year": 2020,
        "plate_number": plate,
        "color": "Blanco",
        "user_id": 1,
    }
    fields.update(overrides)
    return Car(**fields)  # type: ignore[arg-type]


def plates(cars: list[Car]) -> list[str | None]:
    return [car.plate_number for car in cars]


@pytest.fixture()
def garage() -> list[Car]:
    """Five cars in repository order (newest first)."""
    return [
        make_car("AAA111", brand="Toyota", model="Corolla", year=2023, color="Blanco",
                 created_at=datetime(2024, 5, 1), photo_url="http://img/a.jpg"),
        make_car("BBB222", brand="Honda", model="Civic", year=1995, color="Rojo",
                 created_at=datetime(2024, 4, 1)),
        make_car("CCC333", brand="toyota", model="Hilux", year=2010, color="Gris",
                 created_at=datetime(2024, 3, 1)),
        make_car("DDD444", brand="Mazda", model="CX-5", year=None, color="Rojo",
                 created_at=datetime(2024, 2, 1), photo_url="  "),
        make_car("EEE555", brand="Toyota Motors", model="Yaris", year=2018, color="Azul",
                 created_at=datetime(2024, 1, 1)),
    ]


# ==============================================================================
# Field-specific searches
# ==============================================================================


def test_search_by_brand_is_substring(garage: list[Car]) -> None:
    """Brand search finds every brand containing the text."""
    assert plates(search.search_by_brand(garage, "toyota")) == ["AAA111", "CCC333", "EEE555"]


def test_search_by_model_is_substring(garage: list[Car]) -> None:
    """Model search is case-insensitive substring."""
    assert plates(search.search_by_model(garage, "cx")) == ["DDD444"]


def test_filter_by_color_is_exact(garage: list[Car]) -> None:
    """Color filter does not accept partial values."""
    assert plates(search.filter_by_color(garage, "ROJO")) == ["BBB222", "DDD444"]
    assert search.filter_by_color(garage, "Roj") == []


def test_search_by_plate_number(garage: list[Car]) -> None:
    """Plate search is exact and ignores surrounding whitespace."""
    assert plates(search.search_by_plate_number(garage, " ccc333 ")) == ["CCC333"]


def test_blank_plate_finds_nothing(garage: list[Car]) -> None:
    """A blank plate cannot identify a car."""
    assert search.search_by_plate_number(garage, "  ") == []


def test_filter_by_year_range_excludes_unknown_year(garage: list[Car]) -> None:
    """The field-specific range is strict about unknown years."""
    assert plates(search.filter_by_year_range(garage, 2000, 2030)) == [
        "AAA111",
        "CCC333",
        "EEE555",
    ]


def test_filter_by_year(garage: list[Car]) -> None:
    assert plates(search.filter_by_year(garage, 1995)) == ["BBB222"]


def test_photo_facets_partition_the_collection(garage: list[Car]) -> None:
    """A blank photo URL counts as no photo."""
    with_photo = search.cars_with_photo(garage)
    without_photo = search.cars_without_photo(garage)

    assert plates(with_photo) == ["AAA111"]
    assert len(with_photo) + len(without_photo) == len(garage)


def test_vintage_and_new(garage: list[Car]) -> None:
    assert plates(search.vintage_cars(garage, today_year=2025)) == ["BBB222"]
    assert plates(search.new_cars(garage, today_year=2025)) == ["AAA111"]


def test_empty_collection_yields_empty_results() -> None:
    """Every search on an empty collection is empty, never an error."""
    assert search.general_search([], "x") == []
    assert search.advanced_search([], AdvancedSearchCriteria(brand="x")) == []
    assert search.search_cars([], CarSearchCriteria(brand="x")) == []
    assert search.search_paginated([], None, Paging()).content == []


# ==============================================================================
# General, advanced and unified search
# ==============================================================================


def test_general_search_scenario() -> None:
    """'toyota' matches both Toyotas and keeps input order."""
    cars = [
        make_car("P1", brand="Toyota", year=2023),
        make_car("P2", brand="Honda", model="Civic", year=1995),
        make_car("P3", brand="Toyota", year=2010),
    ]

    results = search.general_search(cars, "toyota")

    assert [car.year for car in results] == [2023, 2010]


def test_blank_general_term_returns_everything(garage: list[Car]) -> None:
    assert search.general_search(garage, "") == garage


def test_advanced_search_none_returns_copy(garage: list[Car]) -> None:
    """None criteria return the collection unchanged but not the same list."""
    result = search.advanced_search(garage, None)

    assert result == garage
    assert result is not garage


def test_advanced_search_empty_criteria_only_sorts(garage: list[Car]) -> None:
    """Empty constraints plus a SortOrder only reorder."""
    criteria = AdvancedSearchCriteria(sort_order=SortOrder.YEAR_ASC)

    assert plates(search.advanced_search(garage, criteria)) == [
        "BBB222",
        "CCC333",
        "EEE555",
        "AAA111",
        "DDD444",
    ]


def test_advanced_search_ands_constraints(garage: list[Car]) -> None:
    """Brand substring AND range; unknown year passes the range on this path."""
    criteria = AdvancedSearchCriteria(brand="a", min_year=2000, max_year=2015)

    # Honda (1995) is out of range; Mazda has no year and passes
    assert plates(search.advanced_search(garage, criteria)) == ["CCC333", "DDD444"]


def test_search_cars_without_criteria_sorts_newest_first(garage: list[Car]) -> None:
    """No criteria at all means createdAt descending."""
    shuffled = list(reversed(garage))

    assert plates(search.search_cars(shuffled, None)) == plates(garage)


def test_search_cars_empty_criteria_is_idempotent(garage: list[Car]) -> None:
    """Filter-free criteria keep every car."""
    criteria = CarSearchCriteria(sort_by="year", sort_direction="asc")

    result = search.search_cars(garage, criteria)

    assert sorted(plates(result)) == sorted(plates(garage))
    assert plates(result)[-1] == "DDD444"


def test_search_cars_combines_term_and_exact_filters(garage: list[Car]) -> None:
    """Term narrows by substring, brand then requires an exact match."""
    criteria = CarSearchCriteria(search_term="toyota", brand="TOYOTA", sort_by="year",
                                 sort_direction="desc")

    assert plates(search.search_cars(garage, criteria)) == ["AAA111", "CCC333"]


def test_search_cars_range_keeps_unknown_year(garage: list[Car]) -> None:
    """Search-request ranges let cars without a year through."""
    criteria = CarSearchCriteria(min_year=2015, max_year=2030, sort_by="brand",
                                 sort_direction="asc")

    assert plates(search.search_cars(garage, criteria)) == ["DDD444", "AAA111", "EEE555"]


def test_search_cars_facets(garage: list[Car]) -> None:
    criteria = CarSearchCriteria(is_vintage=False, has_photo=False, sort_by="year",
                                 sort_direction="asc")

    assert plates(search.search_cars(garage, criteria, today_year=2025)) == [
        "CCC333",
        "EEE555",
        "DDD444",
    ]


def test_search_cars_is_intersection_of_single_filters(garage: list[Car]) -> None:
    """Combined filters return exactly the cars every single filter returns."""
    by_brand = set(search.search_cars(garage, CarSearchCriteria(brand="toyota")))
    by_color = set(search.search_cars(garage, CarSearchCriteria(color="gris")))
    by_year = set(search.search_cars(garage, CarSearchCriteria(min_year=2005)))

    combined = search.search_cars(
        garage, CarSearchCriteria(brand="toyota", color="gris", min_year=2005)
    )

    assert set(combined) == by_brand & by_color & by_year
    assert plates(combined) == ["CCC333"]


def test_advanced_search_is_intersection_of_single_filters(garage: list[Car]) -> None:
    """Same AND property on the advanced path, unknown year included."""
    by_brand = set(search.advanced_search(garage, AdvancedSearchCriteria(brand="o")))
    by_model = set(search.advanced_search(garage, AdvancedSearchCriteria(model="a")))
    by_year = set(search.advanced_search(garage, AdvancedSearchCriteria(min_year=2005)))

    combined = search.advanced_search(
        garage, AdvancedSearchCriteria(brand="o", model="a", min_year=2005)
    )

    assert set(combined) == by_brand & by_model & by_year
    assert plates(combined) == ["AAA111", "EEE555"]


def test_blank_sort_direction_uses_descending_default(garage: list[Car]) -> None:
    """A whitespace-only direction counts as absent."""
    shuffled = list(reversed(garage))

    result = search.search_cars(shuffled, CarSearchCriteria(sort_direction="   "))

    assert plates(result) == plates(garage)


# ==============================================================================
# Paginated search
# ==============================================================================


@pytest.mark.parametrize(
    ("criteria", "expected"),
    [
        (StorageCriteria.with_search_term("red"), SearchStrategy.TERM),
        (StorageCriteria(search_term="red", brand="Mazda"), SearchStrategy.TERM),
        (StorageCriteria.with_filters(color="Rojo"), SearchStrategy.FILTERS),
        (StorageCriteria.empty(), SearchStrategy.ALL),
        (StorageCriteria(search_term="  "), SearchStrategy.ALL),
    ],
)
def test_select_strategy(criteria: StorageCriteria, expected: SearchStrategy) -> None:
    """A search term wins over structured filters."""
    assert search.select_strategy(criteria) is expected


def test_paginated_scenario_middle_page() -> None:
    """size=1, page=1 over three cars sorted by year ascending."""
    cars = [
        make_car("P1", year=2023),
        make_car("P2", year=1995),
        make_car("P3", year=2010),
    ]

    page = search.search_paginated(cars, None, Paging(page=1, size=1), "year", "asc")

    assert [car.year for car in page.content] == [2010]
    assert page.has_previous is True
    assert page.has_next is True
    assert page.total_pages == 3
    assert page.total_elements == 3
    assert page.sorted_by == "year"
    assert page.sort_direction == "asc"


def test_paginated_without_sort_keeps_natural_order(garage: list[Car]) -> None:
    """No sort field: input order, reported as unsorted."""
    page = search.search_paginated(garage, None, Paging(page=0, size=2))

    assert plates(page.content) == ["AAA111", "BBB222"]
    assert page.is_sorted is False
    assert page.sorted_by is None


def test_paginated_term_ignores_structured_filters(garage: list[Car]) -> None:
    """With a term present, brand is not applied."""
    criteria = StorageCriteria(search_term="rojo", brand="Honda")

    page = search.search_paginated(garage, criteria, Paging())

    assert plates(page.content) == ["BBB222", "DDD444"]


def test_paginated_filters_reject_unknown_year(garage: list[Car]) -> None:
    """Structured filters reject cars without a year when a range is set."""
    criteria = StorageCriteria.with_filters(color="rojo", min_year=1990)

    page = search.search_paginated(garage, criteria, Paging())

    assert plates(page.content) == ["BBB222"]


def test_paginated_clamps_invalid_paging(garage: list[Car]) -> None:
    """Negative page and oversize size are corrected."""
    page = search.search_paginated(garage, None, Paging(page=-2, size=500))

    assert page.page == 0
    assert page.size == 20
    assert len(page.content) == 5


def test_page_beyond_end_is_empty(garage: list[Car]) -> None:
    page = search.search_paginated(garage, None, Paging(page=9, size=2))

    assert page.content == []
    assert page.total_elements == 5
    assert page.has_next is False


def test_pages_partition_the_result(garage: list[Car]) -> None:
    """Concatenating every page reproduces the full sorted result exactly once."""
    seen: list[str | None] = []
    for number in range(3):
        page = search.search_paginated(garage, None, Paging(page=number, size=2), "brand", "asc")
        assert len(page.content) <= page.size
        seen.extend(plates(page.content))

    assert seen == ["BBB222", "DDD444", "AAA111", "CCC333", "EEE555"]


def test_page_metadata_edges() -> None:
    """First and last page flags, and the empty result."""
    assert Page(content=[], page=0, size=20, total_elements=0).total_pages == 0
    assert Page(content=[], page=0, size=20, total_elements=0).is_last is True
    last = Page(content=[], page=2, size=10, total_elements=25)
    assert last.total_pages == 3
    assert last.is_last is True
    assert last.is_first is False
