"""
Aggregates over a car collection.

Every function accepts any collection, filtered or not, so callers compose
filter-then-aggregate. Nothing is cached between calls.

Brand grouping is case-insensitive. Ties in brand counts are broken by the
order in which a brand first appears in the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from car_registry.domain.car import Car, is_blank
from car_registry.domain.classification import is_new, is_vintage


@dataclass(frozen=True, slots=True)
class YearStatistics:
    min_year: int | None
    max_year: int | None
    average_year: float | None
    total_cars: int

    @property
    def year_range(self) -> int:
        if self.min_year is None or self.max_year is None:
            return 0
        return self.max_year - self.min_year


@dataclass(frozen=True, slots=True)
class BrandCount:
    brand: str  # lower-cased grouping key
    display_name: str  # first spelling seen in the input
    count: int


@dataclass(frozen=True, slots=True)
class CarStatistics:
    total_cars: int
    vintage_count: int
    new_count: int
    with_photo_count: int
    min_year: int | None
    max_year: int | None
    average_year: float | None
    year_range: int
    most_common_brand: str | None
    brand_frequency_ranking: list[BrandCount] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FilterOptions:
    brands: list[str]
    models: list[str]
    colors: list[str]
    years: list[int]

    @property
    def unique_brands(self) -> int:
        return len(self.brands)

    @property
    def unique_models(self) -> int:
        return len(self.models)

    @property
    def unique_colors(self) -> int:
        return len(self.colors)

    @property
    def year_bounds(self) -> tuple[int, int] | None:
        if not self.years:
            return None
        return min(self.years), max(self.years)


def year_statistics(cars: Sequence[Car]) -> YearStatistics:
    """
    Min, max and average over cars that have a year.

    Cars without a year still count toward total_cars. With no known year the
    average is None, not zero.
    """
    years = [car.year for car in cars if car.year is not None]

    if not years:
        return YearStatistics(min_year=None, max_year=None, average_year=None, total_cars=len(cars))

    return YearStatistics(
        min_year=min(years),
        max_year=max(years),
        average_year=sum(years) / len(years),
        total_cars=len(cars),
    )


def brand_frequency(cars: Sequence[Car]) -> list[BrandCount]:
    counts: dict[str, int] = {}
    display_names: dict[str, str] = {}

    for car in cars:
        if is_blank(car.brand):
            continue
        key = car.brand.lower()
        counts[key] = counts.get(key, 0) + 1
        display_names.setdefault(key, car.brand)

    # dicts keep first-seen order and sorted() is stable, so ties stay first-seen
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        BrandCount(brand=key, display_name=display_names[key], count=count)
        for key, count in ranked
    ]


def most_common_brands(cars: Sequence[Car]) -> list[str]:
    """Lower-cased brand names, most frequent first."""
    return [entry.brand for entry in brand_frequency(cars)]


def aggregate(cars: Sequence[Car], today_year: int | None = None) -> CarStatistics:
    years = year_statistics(cars)
    ranking = brand_frequency(cars)

    return CarStatistics(
        total_cars=len(cars),
        vintage_count=sum(1 for car in cars if is_vintage(car.year, today_year)),
        new_count=sum(1 for car in cars if is_new(car.year, today_year)),
        with_photo_count=sum(1 for car in cars if car.has_photo),
        min_year=years.min_year,
        max_year=years.max_year,
        average_year=years.average_year,
        year_range=years.year_range,
        most_common_brand=ranking[0].display_name if ranking else None,
        brand_frequency_ranking=ranking,
    )


def _distinct_text(values: list[str | None]) -> list[str]:
    distinct = list(dict.fromkeys(value for value in values if not is_blank(value)))
    return sorted(distinct, key=str.lower)


def filter_options(cars: Sequence[Car]) -> FilterOptions:
    """Distinct values a caller can offer as filters, newest years first."""
    return FilterOptions(
        brands=_distinct_text([car.brand for car in cars]),
        models=_distinct_text([car.model for car in cars]),
        colors=_distinct_text([car.color for car in cars]),
        years=sorted({car.year for car in cars if car.year is not None}, reverse=True),
    )
