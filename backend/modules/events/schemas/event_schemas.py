# backend/modules/events/schemas/event_schemas.py

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models import MatchStatus


class EventCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=200)
    sport: Optional[str] = Field(None, max_length=100)
    venue: Optional[str] = Field(None, max_length=200)
    start_time: Optional[datetime] = Field(
        None, validation_alias=AliasChoices("start_time", "startTime")
    )


class EventLookup(BaseModel):
    """Event option for financial and scheduling dropdowns"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MatchCreate(BaseModel):
    """Fixture between two or more teams entered in the same event"""

    model_config = ConfigDict(populate_by_name=True)

    event_id: int = Field(..., validation_alias=AliasChoices("event_id", "eventId"))
    venue_name: Optional[str] = Field(
        None, max_length=200, validation_alias=AliasChoices("venue_name", "venueName")
    )
    start_time: datetime = Field(..., validation_alias=AliasChoices("start_time", "startTime"))
    team_ids: List[int] = Field(
        ..., min_length=2, validation_alias=AliasChoices("team_ids", "teamIds")
    )

    @field_validator("start_time")
    def to_utc(cls, v):
        # Times without an offset are taken as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_validator("team_ids")
    def distinct_teams(cls, v):
        if len(set(v)) != len(v):
            raise ValueError("A team cannot be listed twice in one match")
        return v


class TeamPoints(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_id: int = Field(..., validation_alias=AliasChoices("team_id", "teamId"))
    points: int = Field(..., ge=0)


class MatchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score_summary: str = Field(
        ..., max_length=500, validation_alias=AliasChoices("score_summary", "scoreSummary")
    )
    points: List[TeamPoints] = []

    @field_validator("score_summary")
    def summary_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Score summary cannot be blank")
        return v


class MatchCompetitor(BaseModel):
    team_id: int
    team_name: str
    points_awarded: int = 0


class MatchOut(BaseModel):
    id: int
    event_id: int
    event_name: str
    venue_name: Optional[str] = None
    start_time: datetime
    status: MatchStatus
    score_summary: Optional[str] = None
    teams: List[MatchCompetitor] = []

    @field_validator("start_time")
    def assume_utc(cls, v):
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
