# backend/modules/staff/routes/staff_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import RoleCreate, RoleOut, StaffCreate, StaffOut, StaffUpdate
from ..services import StaffService

router = APIRouter(prefix="/api/logistics", tags=["Staff"])


@router.get("/staff", response_model=List[StaffOut])
def list_staff(db: Session = Depends(get_db)):
    """Fetch the staff roster"""
    return StaffService(db).list_staff()


@router.get("/data/roles-list", response_model=List[RoleOut])
def list_roles(db: Session = Depends(get_db)):
    """Roles lookup for staff creation/update dropdowns"""
    return StaffService(db).list_roles()


@router.post("/roles", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_role(role_data: RoleCreate, db: Session = Depends(get_db)):
    role = StaffService(db).create_role(role_data)
    return CreatedResponse(id=role.id, message=f"Role {role.name} created successfully.")


@router.post("/staff", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_staff(staff_data: StaffCreate, db: Session = Depends(get_db)):
    """Register a new staff member"""
    staff = StaffService(db).create_staff(staff_data)
    return CreatedResponse(
        id=staff.id,
        message=f"Staff member {staff.name} registered successfully. ID: {staff.id}",
    )


@router.put("/staff/{staff_id}", response_model=MessageResponse)
def update_staff(staff_id: int, update_data: StaffUpdate, db: Session = Depends(get_db)):
    StaffService(db).update_staff(staff_id, update_data)
    return MessageResponse(message=f"Staff member {staff_id} updated successfully.")


@router.delete("/staff/{staff_id}", response_model=MessageResponse)
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    StaffService(db).delete_staff(staff_id)
    return MessageResponse(message=f"Staff member {staff_id} deleted successfully.")
