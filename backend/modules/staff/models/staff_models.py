# backend/modules/staff/models/staff_models.py

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from core.database import Base


class Role(Base):
    """Staff role (volunteer, referee, driver, coordinator, ...)"""

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)

    staff_members = relationship("StaffMember", back_populates="role", passive_deletes="all")


class StaffMember(Base):
    """Meet staff member; referenced by checkouts, schedules and incidents"""

    __tablename__ = "staff_members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    date_of_birth = Column(Date)
    email = Column(String(255), nullable=False, unique=True)
    phone = Column(String(30), unique=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)

    role = relationship("Role", back_populates="staff_members")
