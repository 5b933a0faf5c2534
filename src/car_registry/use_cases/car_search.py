"""Car search use cases over one owner's collection."""

from __future__ import annotations

import logging
from typing import Callable

from car_registry.domain import classification, search
from car_registry.domain.car import Car, is_blank
from car_registry.domain.criteria import AdvancedSearchCriteria, CarSearchCriteria
from car_registry.domain.errors import NotFoundError, ValidationError
from car_registry.domain.sorting import SortField, sort_by_name, sort_cars
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.owner import require_user_id

logger = logging.getLogger(__name__)


class CarSearch:
    """
    Search, filter and sort a user's cars.

    Responsibilities:
    - Validate the owner id before touching the repository
    - Fetch the owner-scoped collection
    - Delegate matching and ordering to the domain search engine

    List operations return an empty list when nothing matches. Point lookups
    (find_by_plate) raise NotFoundError instead.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        current_year: Callable[[], int] = classification.current_year,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_repository: Repository for car data access
            current_year: Source of the reference year for vintage/new facets
        """
        self._repository = car_repository
        self._current_year = current_year

    # ==========================================================================
    # Field-specific searches
    # ==========================================================================

    def search_by_plate_number(self, plate_number: str | None, user_id: int | None) -> list[Car]:
        return search.search_by_plate_number(self._owned_cars(user_id), plate_number)

    def search_by_model(self, model: str | None, user_id: int | None) -> list[Car]:
        return search.search_by_model(self._owned_cars(user_id), model)

    def search_by_brand(self, brand: str | None, user_id: int | None) -> list[Car]:
        return search.search_by_brand(self._owned_cars(user_id), brand)

    def filter_by_year(self, year: int | None, user_id: int | None) -> list[Car]:
        return search.filter_by_year(self._owned_cars(user_id), year)

    def filter_by_year_range(
        self, min_year: int | None, max_year: int | None, user_id: int | None
    ) -> list[Car]:
        return search.filter_by_year_range(self._owned_cars(user_id), min_year, max_year)

    def filter_by_color(self, color: str | None, user_id: int | None) -> list[Car]:
        return search.filter_by_color(self._owned_cars(user_id), color)

    # ==========================================================================
    # General, advanced and unified searches
    # ==========================================================================

    def general_search(self, search_term: str | None, user_id: int | None) -> list[Car]:
        results = search.general_search(self._owned_cars(user_id), search_term)

        logger.info(
            "General search completed",
            extra={"user_id": user_id, "search_term": search_term, "results_count": len(results)},
        )
        return results

    def quick_search(self, term: str | None, user_id: int | None) -> list[Car]:
        """Same matching as general_search; the entry point for type-ahead lookups."""
        return self.general_search(term, user_id)

    def advanced_search(
        self, criteria: AdvancedSearchCriteria | None, user_id: int | None
    ) -> list[Car]:
        results = search.advanced_search(self._owned_cars(user_id), criteria)

        logger.info(
            "Advanced search completed",
            extra={
                "user_id": user_id,
                "sort_order": criteria.sort_order.value if criteria and criteria.sort_order else None,
                "results_count": len(results),
            },
        )
        return results

    def search_cars(self, user_id: int | None, criteria: CarSearchCriteria | None) -> list[Car]:
        results = search.search_cars(self._owned_cars(user_id), criteria, self._current_year())

        logger.info(
            "Car search completed",
            extra={
                "user_id": user_id,
                "has_filters": criteria is not None and criteria.has_any_filter(),
                "sort_by": criteria.sort_by if criteria else None,
                "results_count": len(results),
            },
        )
        return results

    # ==========================================================================
    # Facets and orderings
    # ==========================================================================

    def get_vintage_cars(self, user_id: int | None) -> list[Car]:
        return search.vintage_cars(self._owned_cars(user_id), self._current_year())

    def get_new_cars(self, user_id: int | None) -> list[Car]:
        return search.new_cars(self._owned_cars(user_id), self._current_year())

    def get_cars_with_photo(self, user_id: int | None) -> list[Car]:
        return search.cars_with_photo(self._owned_cars(user_id))

    def get_cars_without_photo(self, user_id: int | None) -> list[Car]:
        return search.cars_without_photo(self._owned_cars(user_id))

    def get_cars_ordered_by_year_desc(self, user_id: int | None) -> list[Car]:
        return sort_cars(self._owned_cars(user_id), SortField.YEAR, descending=True)

    def get_cars_ordered_by_year_asc(self, user_id: int | None) -> list[Car]:
        return sort_cars(self._owned_cars(user_id), SortField.YEAR, descending=False)

    def get_sorted_cars(self, user_id: int | None, sort_by: str | None, ascending: bool) -> list[Car]:
        """Unknown sort fields fall back to creation time."""
        return sort_by_name(self._owned_cars(user_id), sort_by, ascending)

    # ==========================================================================
    # Point lookups and plate availability
    # ==========================================================================

    def find_by_plate(self, user_id: int | None, plate_number: str | None) -> Car:
        """
        Get one of the owner's cars by plate.

        Raises:
            ValidationError: If user_id is missing or plate_number is blank
            NotFoundError: If no car with that plate belongs to the owner
        """
        owner = require_user_id(user_id)

        if is_blank(plate_number):
            raise ValidationError(
                errors=[
                    {
                        "field": "plate_number",
                        "message": "Plate number is required",
                        "code": "REQUIRED",
                    }
                ]
            )

        car = self._repository.find_by_plate_number(plate_number.strip())

        if car is None or car.user_id != owner:
            logger.info(
                "Car not found by plate",
                extra={"user_id": owner, "plate_number": plate_number},
            )
            raise NotFoundError(resource="Car", identifier=plate_number.strip())

        return car

    def is_plate_available(self, plate_number: str | None) -> bool:
        if is_blank(plate_number):
            return False
        return not self._repository.exists_by_plate_number(plate_number.strip())

    def is_plate_available_for_user(self, plate_number: str | None, user_id: int | None) -> bool:
        """True unless another owner already registered the plate."""
        if is_blank(plate_number) or user_id is None:
            return False
        return not self._repository.exists_by_plate_number_for_other_user(
            plate_number.strip(), user_id
        )

    def _owned_cars(self, user_id: int | None) -> list[Car]:
        return self._repository.find_by_user_id(require_user_id(user_id))
