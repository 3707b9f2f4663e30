# backend/modules/events/models/event_models.py

from enum import Enum

from sqlalchemy import (
    Column,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from core.database import Base


class MatchStatus(str, Enum):
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"


class Event(Base):
    """A competition on the meet programme"""

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    sport = Column(String(100))
    venue = Column(String(200))
    start_time = Column(DateTime)

    matches = relationship("Match", back_populates="event", passive_deletes="all")


class Match(Base):
    """A fixture between teams of one event; points are awarded with the result"""

    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    venue_name = Column(String(200))
    start_time = Column(DateTime(timezone=True), nullable=False, index=True)
    status = Column(
        SQLEnum(
            MatchStatus,
            name="match_status",
            values_callable=lambda enum_cls: [e.value for e in enum_cls],
        ),
        nullable=False,
        default=MatchStatus.SCHEDULED,
        index=True,
    )
    score_summary = Column(Text)

    event = relationship("Event", back_populates="matches")
    competitors = relationship(
        "MatchTeam",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="MatchTeam.id",
    )


class MatchTeam(Base):
    __tablename__ = "match_teams"

    id = Column(Integer, primary_key=True, index=True)
    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    points_awarded = Column(Integer, nullable=False, default=0)

    match = relationship("Match", back_populates="competitors")
    team = relationship("Team")

    __table_args__ = (UniqueConstraint("match_id", "team_id", name="uq_match_team"),)
