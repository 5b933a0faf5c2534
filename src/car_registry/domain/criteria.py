from __future__ import annotations

from dataclasses import dataclass, replace

from car_registry.domain.car import is_blank
from car_registry.domain.sorting import SortOrder, is_descending

DEFAULT_SORT_FIELD = "createdAt"
DEFAULT_SORT_DIRECTION = "desc"

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True, slots=True)
class CarSearchCriteria:
    """
    Search-request criteria: every field optional, absent means unconstrained.

    Blank strings count as absent. Brand, model and color are matched exactly
    (case-insensitive) on this path; the general search term is a substring
    match over brand, model and color.
    """

    search_term: str | None = None
    brand: str | None = None
    model: str | None = None
    year: int | None = None
    min_year: int | None = None
    max_year: int | None = None
    color: str | None = None
    plate_number: str | None = None
    is_vintage: bool | None = None
    is_new: bool | None = None
    has_photo: bool | None = None
    sort_by: str | None = DEFAULT_SORT_FIELD
    sort_direction: str | None = DEFAULT_SORT_DIRECTION

    def has_search_term(self) -> bool:
        return not is_blank(self.search_term)

    def has_brand_filter(self) -> bool:
        return not is_blank(self.brand)

    def has_model_filter(self) -> bool:
        return not is_blank(self.model)

    def has_year_filter(self) -> bool:
        return self.year is not None

    def has_year_range_filter(self) -> bool:
        return self.min_year is not None or self.max_year is not None

    def has_color_filter(self) -> bool:
        return not is_blank(self.color)

    def has_plate_filter(self) -> bool:
        return not is_blank(self.plate_number)

    def has_any_filter(self) -> bool:
        return (
            self.has_search_term()
            or self.has_brand_filter()
            or self.has_model_filter()
            or self.has_year_filter()
            or self.has_year_range_filter()
            or self.has_color_filter()
            or self.has_plate_filter()
            or self.is_vintage is not None
            or self.is_new is not None
            or self.has_photo is not None
        )

    def is_sorting_descending(self) -> bool:
        # absent or blank direction means the default, which is descending
        if is_blank(self.sort_direction):
            return is_descending(DEFAULT_SORT_DIRECTION)
        return is_descending(self.sort_direction)


@dataclass(frozen=True, slots=True)
class AdvancedSearchCriteria:
    """
    Criteria for the advanced search path.

    Differs from CarSearchCriteria on purpose: brand and model are substring
    matches here, and ordering comes from the closed SortOrder set.
    """

    brand: str | None = None
    model: str | None = None
    year: int | None = None
    min_year: int | None = None
    max_year: int | None = None
    color: str | None = None
    plate_number: str | None = None
    general_search_term: str | None = None
    sort_order: SortOrder | None = None

    def with_brand(self, brand: str | None) -> AdvancedSearchCriteria:
        return replace(self, brand=brand)

    def with_model(self, model: str | None) -> AdvancedSearchCriteria:
        return replace(self, model=model)

    def with_year(self, year: int | None) -> AdvancedSearchCriteria:
        return replace(self, year=year)

    def with_year_range(self, min_year: int | None, max_year: int | None) -> AdvancedSearchCriteria:
        return replace(self, min_year=min_year, max_year=max_year)

    def with_color(self, color: str | None) -> AdvancedSearchCriteria:
        return replace(self, color=color)

    def with_plate_number(self, plate_number: str | None) -> AdvancedSearchCriteria:
        return replace(self, plate_number=plate_number)

    def with_general_search(self, search_term: str | None) -> AdvancedSearchCriteria:
        return replace(self, general_search_term=search_term)

    def with_sort_order(self, sort_order: SortOrder | None) -> AdvancedSearchCriteria:
        return replace(self, sort_order=sort_order)

    def is_empty(self) -> bool:
        return (
            is_blank(self.brand)
            and is_blank(self.model)
            and self.year is None
            and self.min_year is None
            and self.max_year is None
            and is_blank(self.color)
            and is_blank(self.plate_number)
            and is_blank(self.general_search_term)
        )


@dataclass(frozen=True, slots=True)
class StorageCriteria:
    """
    The subset of a search request that a storage backend can push down.

    Paginated search picks its strategy from this shape: a search term wins
    over structured filters, and plate number and facets are not carried.
    """

    search_term: str | None = None
    brand: str | None = None
    model: str | None = None
    year: int | None = None
    color: str | None = None
    min_year: int | None = None
    max_year: int | None = None

    def has_search_term(self) -> bool:
        return not is_blank(self.search_term)

    def has_filters(self) -> bool:
        return (
            not is_blank(self.brand)
            or not is_blank(self.model)
            or self.year is not None
            or not is_blank(self.color)
            or self.min_year is not None
            or self.max_year is not None
        )

    def is_empty(self) -> bool:
        return not self.has_search_term() and not self.has_filters()

    @classmethod
    def empty(cls) -> StorageCriteria:
        return cls()

    @classmethod
    def with_search_term(cls, search_term: str | None) -> StorageCriteria:
        return cls(search_term=search_term)

    @classmethod
    def with_filters(
        cls,
        brand: str | None = None,
        model: str | None = None,
        year: int | None = None,
        color: str | None = None,
        min_year: int | None = None,
        max_year: int | None = None,
    ) -> StorageCriteria:
        return cls(
            brand=brand,
            model=model,
            year=year,
            color=color,
            min_year=min_year,
            max_year=max_year,
        )


@dataclass(frozen=True, slots=True)
class Paging:
    """Zero-based page number and page size."""

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def normalized(self) -> Paging:
        """
        Clamp invalid values instead of rejecting them.

        A negative page becomes 0; a size outside (0, MAX_PAGE_SIZE] becomes
        DEFAULT_PAGE_SIZE.
        """
        page = self.page if self.page >= 0 else 0
        size = self.size if 0 < self.size <= MAX_PAGE_SIZE else DEFAULT_PAGE_SIZE
        return Paging(page=page, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size
