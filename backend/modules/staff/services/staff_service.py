# backend/modules/staff/services/staff_service.py

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_utils import write_transaction
from core.exceptions import NotFoundError, StoreFailureError
from ..models import Role, StaffMember
from ..schemas import RoleCreate, RoleOut, StaffCreate, StaffOut, StaffUpdate

logger = logging.getLogger(__name__)

DUPLICATE_STAFF_MESSAGE = "Registration failed. Email or Phone number already in use."
MISSING_ROLE_MESSAGE = "Referenced role does not exist."


class StaffService:
    """Service for the staff directory and role lookup"""

    def __init__(self, db: Session):
        self.db = db

    def list_staff(self) -> List[StaffOut]:
        """Staff roster ordered by role name, then staff name"""
        try:
            rows = (
                self.db.query(
                    StaffMember.id,
                    StaffMember.name,
                    StaffMember.date_of_birth,
                    StaffMember.email,
                    StaffMember.phone,
                    StaffMember.role_id,
                    Role.name.label("role_name"),
                )
                .join(Role, StaffMember.role_id == Role.id)
                .order_by(Role.name, StaffMember.name)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching staff roster: {str(e)}")
            raise StoreFailureError("Failed to fetch staff data.")
        return [StaffOut.model_validate(dict(row._mapping)) for row in rows]

    def list_roles(self) -> List[RoleOut]:
        try:
            roles = self.db.query(Role).order_by(Role.name).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching roles lookup data: {str(e)}")
            raise StoreFailureError("Error fetching roles lookup data.")
        return [RoleOut.model_validate(role) for role in roles]

    def create_role(self, role_data: RoleCreate) -> Role:
        role = Role(name=role_data.name)
        with write_transaction(
            self.db, duplicate_message=f"Role {role_data.name} already exists."
        ):
            self.db.add(role)
        self.db.refresh(role)
        return role

    def get_staff(self, staff_id: int) -> StaffMember:
        staff = self.db.query(StaffMember).filter(StaffMember.id == staff_id).first()
        if not staff:
            raise NotFoundError(f"Staff member {staff_id} not found.")
        return staff

    def create_staff(self, staff_data: StaffCreate) -> StaffMember:
        """Register a staff member; the id is generated by the database"""
        staff = StaffMember(**staff_data.model_dump())
        with write_transaction(
            self.db,
            duplicate_message=DUPLICATE_STAFF_MESSAGE,
            reference_message=MISSING_ROLE_MESSAGE,
            failure_message="Staff registration failed due to a database error.",
        ):
            self.db.add(staff)
        self.db.refresh(staff)
        logger.info(f"Registered staff member {staff.id} ({staff.name})")
        return staff

    def update_staff(self, staff_id: int, update_data: StaffUpdate) -> StaffMember:
        staff = self.get_staff(staff_id)
        with write_transaction(
            self.db,
            duplicate_message="Update failed. Email or Phone number already in use.",
            reference_message=MISSING_ROLE_MESSAGE,
            failure_message="Staff update failed due to a database error.",
        ):
            for field, value in update_data.model_dump().items():
                setattr(staff, field, value)
        self.db.refresh(staff)
        return staff

    def delete_staff(self, staff_id: int) -> None:
        staff = self.get_staff(staff_id)
        with write_transaction(
            self.db,
            reference_message=(
                "Deletion failed. Staff member is referenced in other records "
                "(e.g., Equipment Checkouts, Transport Schedules, or Incidents)."
            ),
            failure_message="Deletion failed due to a database error.",
        ):
            self.db.delete(staff)
        logger.info(f"Deleted staff member {staff_id}")
