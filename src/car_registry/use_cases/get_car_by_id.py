"""Get car by ID use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_registry.domain.car import Car
from car_registry.domain.errors import NotFoundError, ValidationError
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.owner import require_user_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GetCarByIdRequest:
    """Request to get one of the owner's cars by ID."""

    car_id: int
    user_id: int | None


@dataclass(frozen=True, slots=True)
class GetCarByIdResponse:
    """Response containing the requested car."""

    car: Car


class GetCarById:
    """
    Use case for retrieving a single car by ID.

    Responsibilities:
    - Validate the owner id and car_id (positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if the car doesn't exist or belongs to someone else
    """

    def __init__(self, car_repository: CarRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            car_repository: Repository for car data access
        """
        self._repository = car_repository

    def execute(self, request: GetCarByIdRequest) -> GetCarByIdResponse:
        """
        Execute the get car by ID use case.

        Args:
            request: Request containing car_id and user_id

        Returns:
            GetCarByIdResponse with the car

        Raises:
            ValidationError: If user_id is missing or car_id is not a positive integer
            NotFoundError: If no car with that ID belongs to the owner
        """
        user_id = require_user_id(request.user_id)

        car_id = request.car_id
        if isinstance(car_id, bool) or not isinstance(car_id, int) or car_id <= 0:
            raise ValidationError(
                errors=[
                    {
                        "field": "car_id",
                        "message": "Must be a positive integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        car = self._repository.find_by_id(car_id)

        # A foreign car is reported exactly like a missing one
        if car is None or car.user_id != user_id:
            logger.info("Car not found", extra={"car_id": car_id, "user_id": user_id})
            raise NotFoundError(resource="Car", identifier=str(car_id))

        return GetCarByIdResponse(car=car)
