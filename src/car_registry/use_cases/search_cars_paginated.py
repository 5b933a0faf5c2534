from __future__ import annotations

import logging
from dataclasses import dataclass

from car_registry.domain import search
from car_registry.domain.criteria import DEFAULT_PAGE_SIZE, Paging, StorageCriteria
from car_registry.domain.search import Page
from car_registry.ports.car_repository import CarRepository
from car_registry.use_cases.owner import require_user_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchCarsPaginatedRequest:
    user_id: int | None
    criteria: StorageCriteria | None = None
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort_by: str | None = None
    sort_direction: str | None = "asc"


@dataclass(frozen=True, slots=True)
class SearchCarsPaginatedResponse:
    page: Page


class SearchCarsPaginated:
    """
    Paginated search over one owner's cars.

    Invalid paging is clamped rather than rejected. Without a sort field the
    page keeps the repository's natural order (newest first) and is reported
    as unsorted.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: SearchCarsPaginatedRequest) -> SearchCarsPaginatedResponse:
        """
        Execute paginated search.

        Raises:
            ValidationError: If user_id is missing
        """
        user_id = require_user_id(request.user_id)
        criteria = request.criteria or StorageCriteria.empty()

        requested = Paging(page=request.page, size=request.size)
        paging = requested.normalized()
        if paging != requested:
            logger.debug(
                "Paging clamped",
                extra={
                    "requested_page": request.page,
                    "requested_size": request.size,
                    "page": paging.page,
                    "size": paging.size,
                },
            )

        logger.debug(
            "Paginated search strategy selected",
            extra={"user_id": user_id, "strategy": search.select_strategy(criteria).value},
        )

        result = search.search_paginated(
            self._repository.find_by_user_id(user_id),
            criteria,
            paging,
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
        )

        logger.info(
            "Paginated search completed",
            extra={
                "user_id": user_id,
                "page": result.page,
                "size": result.size,
                "total_elements": result.total_elements,
            },
        )

        return SearchCarsPaginatedResponse(page=result)
