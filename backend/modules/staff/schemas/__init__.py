"""Staff schemas module"""

from .staff_schemas import RoleCreate, RoleOut, StaffCreate, StaffOut, StaffUpdate

__all__ = ["RoleCreate", "RoleOut", "StaffCreate", "StaffOut", "StaffUpdate"]
