from department_api.models.base import Base
from department_api.models.organization.department import Department
