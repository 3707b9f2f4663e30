"""Staff models module"""

from .staff_models import Role, StaffMember

__all__ = ["Role", "StaffMember"]
