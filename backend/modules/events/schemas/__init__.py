from .event_schemas import (
    EventCreate,
    EventLookup,
    MatchCompetitor,
    MatchCreate,
    MatchOut,
    MatchResult,
    TeamPoints,
)

__all__ = [
    "EventCreate",
    "EventLookup",
    "MatchCompetitor",
    "MatchCreate",
    "MatchOut",
    "MatchResult",
    "TeamPoints",
]
