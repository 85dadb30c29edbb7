"""Persistence for departments.

``DepartmentRepositoryInterface`` is what the service layer depends on;
``DepartmentRepository`` implements it on top of an async SQLAlchemy
session.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from department_api.core.exceptions import DatabaseError
from department_api.models.organization.department import Department

logger = logging.getLogger(__name__)


class DepartmentRepositoryInterface(ABC):

    @abstractmethod
    async def save(self, department: Department) -> Department:
        """Insert when ``department.id`` is unset, otherwise replace the row with that id."""

    @abstractmethod
    async def find_by_id(self, department_id: int) -> Optional[Department]: ...

    @abstractmethod
    async def find_all(self) -> List[Department]: ...

    @abstractmethod
    async def delete_by_id(self, department_id: int) -> None:
        """Remove the row if present. Missing ids are ignored."""

    @abstractmethod
    async def find_by_name_ignore_case(self, name: str) -> Optional[Department]:
        """Exact, case-insensitive name match. On duplicates the lowest id wins."""


class DepartmentRepository(DepartmentRepositoryInterface):
    def __init__(self, session: AsyncSession):
        self.session = session

    # ---------- Queries ----------
    async def find_by_id(self, department_id: int) -> Optional[Department]:
        try:
            result = await self.session.execute(
                select(Department).where(Department.id == department_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting department {department_id}: {e}")
            raise DatabaseError("Error getting department")

    async def find_all(self) -> List[Department]:
        try:
            result = await self.session.execute(
                select(Department).order_by(Department.id)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Error getting departments: {e}")
            raise DatabaseError("Error getting departments")

    async def find_by_name_ignore_case(self, name: str) -> Optional[Department]:
        try:
            result = await self.session.execute(
                select(Department)
                .where(func.lower(Department.name) == func.lower(name))
                .order_by(Department.id)
                .limit(1)
            )
            return result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting department by name: {e}")
            raise DatabaseError("Error getting department")

    # ---------- Mutations ----------
    async def save(self, department: Department) -> Department:
        try:
            if department.id is None:
                self.session.add(department)
            else:
                department = await self.session.merge(department)
            await self.session.flush()
            await self.session.commit()
            await self.session.refresh(department)
            return department
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error saving department: {e}")
            raise DatabaseError("Error saving department")

    async def delete_by_id(self, department_id: int) -> None:
        try:
            await self.session.execute(
                delete(Department).where(Department.id == department_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting department {department_id}: {e}")
            raise DatabaseError("Error deleting department")
