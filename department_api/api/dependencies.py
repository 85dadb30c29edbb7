from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from department_api.core.database import get_async_session
from department_api.repositories.organization.department_repository import DepartmentRepository
from department_api.services.organization.department_service import DepartmentService


def get_department_service(
    session: AsyncSession = Depends(get_async_session)
) -> DepartmentService:
    """Build the department service for the current request's session"""
    return DepartmentService(DepartmentRepository(session))
