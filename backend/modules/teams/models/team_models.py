# backend/modules/teams/models/team_models.py

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from core.database import Base


class Team(Base):
    """An institute's entry into one event"""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    team_name = Column(String(150), nullable=False)
    institute_id = Column(Integer, ForeignKey("institutes.id"), nullable=False, index=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)

    institute = relationship("Institute")
    event = relationship("Event")
    members = relationship("TeamMember", back_populates="team", cascade="all, delete-orphan")

    __table_args__ = (UniqueConstraint("event_id", "team_name", name="uq_team_event_name"),)


class TeamMember(Base):
    __tablename__ = "team_members"

    id = Column(Integer, primary_key=True, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    participant_id = Column(Integer, ForeignKey("participants.id"), nullable=False, index=True)

    team = relationship("Team", back_populates="members")
    participant = relationship("Participant")

    __table_args__ = (
        UniqueConstraint("team_id", "participant_id", name="uq_team_member"),
    )
