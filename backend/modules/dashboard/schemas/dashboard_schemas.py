# backend/modules/dashboard/schemas/dashboard_schemas.py

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_validator


class InstituteStanding(BaseModel):
    """Leaderboard row; ``institute`` is the short name the UI keys on"""

    institute: str
    institute_name: str
    total_points: int = 0


class MatchCard(BaseModel):
    match_id: int
    event_name: str
    venue_name: Optional[str] = None
    start_time: datetime
    competitors: Optional[str] = None
    score_summary: Optional[str] = None

    @field_validator("start_time")
    def assume_utc(cls, v):
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
