from .dashboard_schemas import InstituteStanding, MatchCard

__all__ = ["InstituteStanding", "MatchCard"]
