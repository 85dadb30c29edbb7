from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from typing import List
from department_api.api.dependencies import get_department_service
from department_api.schemas.common.error_schema import ErrorMessage
from department_api.services.organization.department_service import DepartmentService
from department_api.schemas.organization.department_schema import DepartmentCreate, DepartmentUpdate, DepartmentResponse

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ErrorMessage}}

@router.post("", response_model=DepartmentResponse, responses={400: {"model": ErrorMessage}})
async def create_department(
    department: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service),
):
    """Create a new department"""
    return await service.create_department(department)

@router.get("", response_model=List[DepartmentResponse])
async def get_departments(
    service: DepartmentService = Depends(get_department_service),
):
    """Get all departments"""
    return await service.get_departments()

@router.get("/name/{name}", response_model=DepartmentResponse, responses=NOT_FOUND_RESPONSE)
async def get_department_by_name(
    name: str,
    service: DepartmentService = Depends(get_department_service),
):
    """Get department by name, ignoring case"""
    return await service.get_department_by_name(name)

@router.get("/{department_id}", response_model=DepartmentResponse, responses=NOT_FOUND_RESPONSE)
async def get_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service),
):
    """Get department by ID"""
    return await service.get_department(department_id)

@router.put("/{department_id}", response_model=DepartmentResponse, responses=NOT_FOUND_RESPONSE)
async def update_department(
    department_id: int,
    department: DepartmentUpdate,
    service: DepartmentService = Depends(get_department_service),
):
    """Update department"""
    return await service.update_department(department_id, department)

@router.delete("/{department_id}", response_class=PlainTextResponse)
async def delete_department(
    department_id: int,
    service: DepartmentService = Depends(get_department_service),
):
    """Delete department"""
    await service.delete_department(department_id)
    return "Department Deleted Successfully!"
