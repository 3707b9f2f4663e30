# backend/modules/teams/schemas/team_schemas.py

from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class TeamCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_name: str = Field(
        ..., min_length=1, max_length=150, validation_alias=AliasChoices("team_name", "teamName")
    )
    institute_id: int = Field(
        ..., validation_alias=AliasChoices("institute_id", "instituteId")
    )
    event_id: int = Field(..., validation_alias=AliasChoices("event_id", "eventId"))

    @field_validator("team_name")
    def strip_team_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Team name cannot be blank")
        return v


class TeamRename(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_name: str = Field(
        ..., min_length=1, max_length=150, validation_alias=AliasChoices("team_name", "teamName")
    )

    @field_validator("team_name")
    def strip_team_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Team name cannot be blank")
        return v


class TeamMemberAdd(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    participant_id: int = Field(
        ..., validation_alias=AliasChoices("participant_id", "participantId")
    )


class TeamOut(BaseModel):
    """Team row joined with institute short name and event name"""

    id: int
    team_name: str
    institute_id: int
    institute: str
    event_id: int
    event_name: str
    member_count: int = 0


class TeamMemberOut(BaseModel):
    participant_id: int
    name: str
    email: str


class TeamDetail(TeamOut):
    members: List[TeamMemberOut] = []
