from __future__ import annotations

from car_registry.domain.car import is_blank
from car_registry.domain.criteria import (
    DEFAULT_SORT_DIRECTION,
    DEFAULT_SORT_FIELD,
    AdvancedSearchCriteria,
    CarSearchCriteria,
    StorageCriteria,
)
from car_registry.dtos.car_search import CarSearchRequestDTO


def _clean(value: str | None) -> str | None:
    return None if is_blank(value) else value.strip()


class CarSearchMapper:
    """
    Maps a search request DTO to the domain criteria types.

    Every conversion is total: absent or blank fields become None, and an
    absent sort field or direction becomes the default (createdAt, desc).
    """

    @staticmethod
    def to_domain_criteria(dto: CarSearchRequestDTO | None) -> CarSearchCriteria:
        """
        Converts a search request to criteria for the unified search.

        Args:
            dto: The search request, or None for "no constraints"

        Returns:
            CarSearchCriteria: Criteria with defaults substituted
        """
        if dto is None:
            return CarSearchCriteria()

        return CarSearchCriteria(
            search_term=_clean(dto.search_term),
            brand=_clean(dto.brand),
            model=_clean(dto.model),
            year=dto.year,
            min_year=dto.min_year,
            max_year=dto.max_year,
            color=_clean(dto.color),
            plate_number=_clean(dto.plate_number),
            is_vintage=dto.is_vintage,
            is_new=dto.is_new,
            has_photo=dto.has_photo,
            sort_by=_clean(dto.sort_by) or DEFAULT_SORT_FIELD,
            sort_direction=(_clean(dto.sort_direction) or DEFAULT_SORT_DIRECTION).lower(),
        )

    @staticmethod
    def to_storage_criteria(dto: CarSearchRequestDTO | None) -> StorageCriteria:
        """
        Converts a search request to the subset a storage backend can push down.

        Plate number and the vintage/new/photo facets are dropped.
        """
        if dto is None:
            return StorageCriteria.empty()

        return StorageCriteria(
            search_term=_clean(dto.search_term),
            brand=_clean(dto.brand),
            model=_clean(dto.model),
            year=dto.year,
            color=_clean(dto.color),
            min_year=dto.min_year,
            max_year=dto.max_year,
        )

    @staticmethod
    def to_advanced_criteria(dto: CarSearchRequestDTO | None) -> AdvancedSearchCriteria:
        """Facets are dropped; the advanced path orders by SortOrder, not sort_by."""
        if dto is None:
            return AdvancedSearchCriteria()

        return AdvancedSearchCriteria(
            brand=_clean(dto.brand),
            model=_clean(dto.model),
            year=dto.year,
            min_year=dto.min_year,
            max_year=dto.max_year,
            color=_clean(dto.color),
            plate_number=_clean(dto.plate_number),
            general_search_term=_clean(dto.search_term),
        )
