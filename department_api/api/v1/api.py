from fastapi import APIRouter
from department_api.api.v1.endpoints.organization import departments

api_router = APIRouter()

# Organization routes
api_router.include_router(departments.router, prefix="/departments", tags=["Departments"])
