"""PostgreSQL implementation of CarRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from car_registry.domain.car import Car
from car_registry.infra.db.models.car import CarRow
from car_registry.ports.car_repository import CarRepository


class PostgresCarRepository(CarRepository):
    """
    PostgreSQL implementation of CarRepository.

    - Uses SQLAlchemy ORM for database access
    - Owner collections come back newest first (ORDER BY created_at DESC)
    - Plate numbers are compared upper-cased, matching how they are stored
    - Converts CarRow (infrastructure) to Car (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find_by_user_id(self, user_id: int) -> list[Car]:
        query = (
            select(CarRow)
            .where(CarRow.user_id == user_id)
            .order_by(CarRow.created_at.desc(), CarRow.id.desc())
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def find_by_plate_number(self, plate_number: str) -> Car | None:
        query = select(CarRow).where(CarRow.plate_number == plate_number.strip().upper())
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def find_by_id(self, car_id: int) -> Car | None:
        row = self._session.get(CarRow, car_id)
        return self._to_domain(row) if row else None

    def exists_by_plate_number(self, plate_number: str) -> bool:
        query = select(func.count()).where(CarRow.plate_number == plate_number.strip().upper())
        return (self._session.execute(query).scalar() or 0) > 0

    def exists_by_plate_number_for_other_user(self, plate_number: str, user_id: int) -> bool:
        query = select(func.count()).where(
            CarRow.plate_number == plate_number.strip().upper(),
            CarRow.user_id != user_id,
        )
        return (self._session.execute(query).scalar() or 0) > 0

    def _to_domain(self, row: CarRow) -> Car:
        """
        Convert database model (CarRow) to domain entity (Car).

        Args:
            row: SQLAlchemy CarRow model

        Returns:
            Car domain entity
        """
        return Car(
            id=row.id,
            brand=row.brand,
            model=row.model,
            year=row.year,
            plate_number=row.plate_number,
            color=row.color,
            photo_url=row.photo_url,
            user_id=row.user_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
