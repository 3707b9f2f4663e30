"""Team schemas module"""

from .team_schemas import (
    TeamCreate,
    TeamDetail,
    TeamMemberAdd,
    TeamMemberOut,
    TeamOut,
    TeamRename,
)

__all__ = [
    "TeamCreate",
    "TeamDetail",
    "TeamMemberAdd",
    "TeamMemberOut",
    "TeamOut",
    "TeamRename",
]
