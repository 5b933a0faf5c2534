from __future__ import annotations

from dataclasses import dataclass
from datetime import date

VINTAGE_AGE_YEARS = 25
NEW_CAR_MAX_AGE_YEARS = 3
UNKNOWN_AGE = -1


def current_year() -> int:
    """Local calendar year, read from the system clock on every call."""
    return date.today().year


@dataclass(frozen=True, slots=True)
class Classification:
    is_vintage: bool
    is_new: bool
    age_years: int


def age_of(year: int | None, today_year: int | None = None) -> int:
    if year is None:
        return UNKNOWN_AGE
    return (today_year if today_year is not None else current_year()) - year


def is_vintage(year: int | None, today_year: int | None = None) -> bool:
    return year is not None and age_of(year, today_year) >= VINTAGE_AGE_YEARS


def is_new(year: int | None, today_year: int | None = None) -> bool:
    return year is not None and age_of(year, today_year) <= NEW_CAR_MAX_AGE_YEARS


def classify(year: int | None, today_year: int | None = None) -> Classification:
    """
    Derive the year-based facts of a car.

    Nothing is cached: the reference year is the wall-clock year unless the
    caller pins one. A null year is never vintage nor new, and its age is
    UNKNOWN_AGE.
    """
    if today_year is None:
        today_year = current_year()

    return Classification(
        is_vintage=is_vintage(year, today_year),
        is_new=is_new(year, today_year),
        age_years=age_of(year, today_year),
    )
