from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from car_registry.domain import classification, statistics
from car_registry.domain.car import Car
from car_registry.domain.criteria import CarSearchCriteria
from car_registry.domain.search import search_cars
from car_registry.domain.statistics import CarStatistics, FilterOptions, YearStatistics
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.owner import require_user_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GetCarStatisticsRequest:
    user_id: int | None
    criteria: CarSearchCriteria | None = None  # None aggregates the whole collection


@dataclass(frozen=True, slots=True)
class GetCarStatisticsResponse:
    statistics: CarStatistics


class GetCarStatistics:
    """
    Aggregates over one owner's cars.

    With criteria the aggregate covers only the matching cars, so the numbers
    line up with what the same search would list.
    """

    def __init__(
        self,
        car_repository: CarRepository,
        current_year: Callable[[], int] = classification.current_year,
    ) -> None:
        self._repository = car_repository
        self._current_year = current_year

    def execute(self, request: GetCarStatisticsRequest) -> GetCarStatisticsResponse:
        """
        Raises:
            ValidationError: If user_id is missing
        """
        today_year = self._current_year()
        cars = self._owned_cars(request.user_id)

        if request.criteria is not None:
            cars = search_cars(cars, request.criteria, today_year)

        result = statistics.aggregate(cars, today_year)

        logger.info(
            "Car statistics computed",
            extra={
                "user_id": request.user_id,
                "filtered": request.criteria is not None,
                "total_cars": result.total_cars,
            },
        )
        return GetCarStatisticsResponse(statistics=result)

    def most_common_brands(self, user_id: int | None) -> list[str]:
        return statistics.most_common_brands(self._owned_cars(user_id))

    def year_statistics(self, user_id: int | None) -> YearStatistics:
        return statistics.year_statistics(self._owned_cars(user_id))

    def filter_options(self, user_id: int | None) -> FilterOptions:
        return statistics.filter_options(self._owned_cars(user_id))

    def _owned_cars(self, user_id: int | None) -> list[Car]:
        return self._repository.find_by_user_id(require_user_id(user_id))
