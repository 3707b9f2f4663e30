from .team_models import Team, TeamMember

__all__ = ["Team", "TeamMember"]
