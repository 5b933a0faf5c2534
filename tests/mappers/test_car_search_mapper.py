"""Tests for CarSearchRequestDTO validation and CarSearchMapper conversions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from car_registry.domain.criteria import (
    AdvancedSearchCriteria,
    CarSearchCriteria,
    StorageCriteria,
)
from car_registry.dtos.car_search import CarSearchRequestDTO
from car_registry.mappers.car_search_mapper import CarSearchMapper


# ==============================================================================
# DTO validation
# ==============================================================================


def test_dto_defaults() -> None:
    dto = CarSearchRequestDTO()

    assert dto.sort_by == "createdAt"
    assert dto.sort_direction == "desc"
    assert dto.search_term is None


@pytest.mark.parametrize(
    "payload",
    [
        {"search_term": "x" * 101},
        {"brand": "x" * 31},
        {"model": "x" * 51},
        {"color": "x" * 21},
        {"plate_number": "x" * 11},
        {"year": 1949},
        {"min_year": 2031},
        {"max_year": 1900},
        {"sort_by": "price"},
        {"sort_direction": "up"},
    ],
)
def test_dto_rejects_out_of_bounds_values(payload: dict[str, object]) -> None:
    with pytest.raises(PydanticValidationError):
        CarSearchRequestDTO(**payload)


@pytest.mark.parametrize("direction", ["asc", "DESC", "Desc"])
def test_dto_accepts_direction_in_any_case(direction: str) -> None:
    assert CarSearchRequestDTO(sort_direction=direction).sort_direction == direction


# ==============================================================================
# to_domain_criteria
# ==============================================================================


def test_to_domain_criteria_maps_every_field() -> None:
    dto = CarSearchRequestDTO(
        search_term=" toy ",
        brand="Toyota",
        model="Corolla",
        year=2020,
        min_year=2015,
        max_year=2022,
        color="Rojo",
        plate_number="abc123",
        is_vintage=False,
        is_new=True,
        has_photo=True,
        sort_by="year",
        sort_direction="ASC",
    )

    criteria = CarSearchMapper.to_domain_criteria(dto)

    assert criteria == CarSearchCriteria(
        search_term="toy",
        brand="Toyota",
        model="Corolla",
        year=2020,
        min_year=2015,
        max_year=2022,
        color="Rojo",
        plate_number="abc123",
        is_vintage=False,
        is_new=True,
        has_photo=True,
        sort_by="year",
        sort_direction="asc",
    )


def test_to_domain_criteria_substitutes_defaults() -> None:
    """Absent and blank values become None; absent sorting becomes the default."""
    dto = CarSearchRequestDTO(brand="  ", sort_by=None, sort_direction=None)

    criteria = CarSearchMapper.to_domain_criteria(dto)

    assert criteria.brand is None
    assert criteria.sort_by == "createdAt"
    assert criteria.sort_direction == "desc"
    assert criteria.has_any_filter() is False


def test_to_domain_criteria_from_none() -> None:
    assert CarSearchMapper.to_domain_criteria(None) == CarSearchCriteria()


# ==============================================================================
# to_storage_criteria / to_advanced_criteria
# ==============================================================================


def test_to_storage_criteria_drops_plate_and_facets() -> None:
    dto = CarSearchRequestDTO(brand="Mazda", plate_number="XYZ1", has_photo=True, min_year=2010)

    assert CarSearchMapper.to_storage_criteria(dto) == StorageCriteria(brand="Mazda", min_year=2010)


def test_to_storage_criteria_from_none_is_empty() -> None:
    assert CarSearchMapper.to_storage_criteria(None).is_empty() is True


def test_to_advanced_criteria_maps_term_to_general_search() -> None:
    dto = CarSearchRequestDTO(search_term="rojo", brand="toy", is_new=True)

    criteria = CarSearchMapper.to_advanced_criteria(dto)

    assert criteria == AdvancedSearchCriteria(brand="toy", general_search_term="rojo")
    assert criteria.sort_order is None


def test_to_advanced_criteria_from_none_is_empty() -> None:
    assert CarSearchMapper.to_advanced_criteria(None).is_empty() is True
