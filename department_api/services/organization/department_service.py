import logging
from typing import List
from department_api.core.exceptions import DepartmentNotFoundError
from department_api.models.organization.department import Department
from department_api.repositories.organization.department_repository import DepartmentRepositoryInterface
from department_api.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)

# Fields a partial update may overwrite
MERGEABLE_FIELDS = ("name", "address", "code")


class DepartmentService:
    def __init__(self, repository: DepartmentRepositoryInterface):
        self.repository = repository

    # ---------- Getters ----------
    async def get_departments(self) -> List[Department]:
        return await self.repository.find_all()

    async def get_department(self, department_id: int) -> Department:
        dept = await self.repository.find_by_id(department_id)
        if dept is None:
            raise DepartmentNotFoundError()
        return dept

    async def get_department_by_name(self, name: str) -> Department:
        dept = await self.repository.find_by_name_ignore_case(name)
        if dept is None:
            raise DepartmentNotFoundError()
        return dept

    # ---------- Create / Update / Delete ----------
    async def create_department(self, data: DepartmentCreate) -> Department:
        dept = Department(
            name=data.name,
            address=data.address,
            code=data.code,
        )
        dept = await self.repository.save(dept)
        logger.info(f"Department created: {dept.id} {dept.name}")
        return dept

    async def update_department(self, department_id: int, data: DepartmentUpdate) -> Department:
        """Merge ``data`` into the stored department.

        Only non-empty values are applied; ``None`` and ``""`` keep the
        current value, so a field cannot be cleared through this call.
        """
        dept = await self.get_department(department_id)

        for field in MERGEABLE_FIELDS:
            value = getattr(data, field)
            if value:
                setattr(dept, field, value)

        dept = await self.repository.save(dept)
        logger.info(f"Department updated: {dept.id} {dept.name}")
        return dept

    async def delete_department(self, department_id: int) -> None:
        await self.repository.delete_by_id(department_id)
        logger.info(f"Department deleted: {department_id}")
