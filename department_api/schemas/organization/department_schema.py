from pydantic import BaseModel, ConfigDict, Field, validator
from typing import Optional

class DepartmentBase(BaseModel):
    name: str = Field(..., alias="departmentName")
    address: Optional[str] = Field(None, alias="departmentAddress")
    code: Optional[str] = Field(None, alias="departmentCode")

    model_config = ConfigDict(populate_by_name=True)

class DepartmentCreate(DepartmentBase):
    """Incoming payload for a new department; ``departmentId`` is ignored."""

    @validator('name')
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError('Please Add Department Name')
        return v

class DepartmentUpdate(BaseModel):
    """Partial update. Null or empty-string fields leave the stored value as is."""
    name: Optional[str] = Field(None, alias="departmentName")
    address: Optional[str] = Field(None, alias="departmentAddress")
    code: Optional[str] = Field(None, alias="departmentCode")

    model_config = ConfigDict(populate_by_name=True)

    @validator('name')
    def validate_name(cls, v):
        # "" keeps the current name; anything else must be a real name
        if v and not v.strip():
            raise ValueError('Please Add Department Name')
        return v

class DepartmentResponse(DepartmentBase):
    id: int = Field(..., alias="departmentId")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
