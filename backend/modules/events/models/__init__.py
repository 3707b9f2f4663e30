from .event_models import Event, Match, MatchStatus, MatchTeam

__all__ = ["Event", "Match", "MatchStatus", "MatchTeam"]
