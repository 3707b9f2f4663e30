# backend/modules/staff/schemas/staff_schemas.py

from datetime import date
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class StaffBase(BaseModel):
    """Base schema for staff members"""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=255)
    phone: Optional[str] = Field(None, max_length=30)
    date_of_birth: Optional[date] = Field(
        None, validation_alias=AliasChoices("date_of_birth", "dob")
    )
    role_id: int = Field(..., validation_alias=AliasChoices("role_id", "roleId"))


class StaffCreate(StaffBase):
    """Schema for registering a staff member"""

    pass


class StaffUpdate(StaffBase):
    """Schema for updating a staff member; the UI always sends the full form"""

    pass


class StaffOut(BaseModel):
    """Staff roster row joined with the role name"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    date_of_birth: Optional[date] = None
    email: str
    phone: Optional[str] = None
    role_id: int
    role_name: str


class RoleOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RoleCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
