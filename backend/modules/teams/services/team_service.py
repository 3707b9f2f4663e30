# backend/modules/teams/services/team_service.py

import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_utils import write_transaction
from core.exceptions import NotFoundError, StoreFailureError, ValidationError
from modules.events.models import Event
from modules.participants.models import Institute, Participant

from ..models import Team, TeamMember
from ..schemas import TeamCreate, TeamDetail, TeamMemberAdd, TeamMemberOut, TeamOut, TeamRename

logger = logging.getLogger(__name__)

TEAM_REFERENCE_MESSAGE = "Team references an unknown institute or event."
TEAM_IN_USE_MESSAGE = "Deletion failed. Team is scheduled in one or more matches."


class TeamService:
    """Service for event teams and their rosters"""

    def __init__(self, db: Session):
        self.db = db

    def _team_query(self):
        return (
            self.db.query(
                Team.id,
                Team.team_name,
                Team.institute_id,
                Institute.short_name.label("institute"),
                Team.event_id,
                Event.name.label("event_name"),
                func.count(TeamMember.id).label("member_count"),
            )
            .join(Institute, Team.institute_id == Institute.id)
            .join(Event, Team.event_id == Event.id)
            .outerjoin(TeamMember, TeamMember.team_id == Team.id)
            .group_by(
                Team.id,
                Team.team_name,
                Team.institute_id,
                Institute.short_name,
                Team.event_id,
                Event.name,
            )
        )

    def list_teams(self, event_id: Optional[int] = None) -> List[TeamOut]:
        """Teams ordered by event name, institute short name, then team name"""
        query = self._team_query()
        if event_id is not None:
            query = query.filter(Team.event_id == event_id)
        try:
            rows = query.order_by(Event.name, Institute.short_name, Team.team_name).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching teams: {str(e)}")
            raise StoreFailureError("Failed to fetch teams data.")
        return [TeamOut.model_validate(dict(row._mapping)) for row in rows]

    def get_team(self, team_id: int) -> Team:
        team = self.db.query(Team).filter(Team.id == team_id).first()
        if not team:
            raise NotFoundError("Team not found.")
        return team

    def get_team_detail(self, team_id: int) -> TeamDetail:
        row = self._team_query().filter(Team.id == team_id).first()
        if row is None:
            raise NotFoundError("Team not found.")

        members = (
            self.db.query(
                Participant.id.label("participant_id"),
                Participant.name,
                Participant.email,
            )
            .join(TeamMember, TeamMember.participant_id == Participant.id)
            .filter(TeamMember.team_id == team_id)
            .order_by(Participant.name)
            .all()
        )
        return TeamDetail(
            **row._mapping,
            members=[TeamMemberOut.model_validate(dict(m._mapping)) for m in members],
        )

    def create_team(self, team_data: TeamCreate) -> Team:
        team = Team(**team_data.model_dump())
        with write_transaction(
            self.db,
            duplicate_message=f"Team {team_data.team_name} is already entered in this event.",
            reference_message=TEAM_REFERENCE_MESSAGE,
            failure_message="Team creation failed due to a database error.",
        ):
            self.db.add(team)
        self.db.refresh(team)
        logger.info(f"Created team {team.id} ({team.team_name}) for event {team.event_id}")
        return team

    def rename_team(self, team_id: int, rename_data: TeamRename) -> Team:
        team = self.get_team(team_id)
        with write_transaction(
            self.db,
            duplicate_message=f"Team {rename_data.team_name} is already entered in this event.",
            failure_message="Team update failed due to a database error.",
        ):
            team.team_name = rename_data.team_name
        self.db.refresh(team)
        return team

    def delete_team(self, team_id: int) -> None:
        team = self.get_team(team_id)
        with write_transaction(
            self.db,
            reference_message=TEAM_IN_USE_MESSAGE,
            failure_message="Team deletion failed due to a database error.",
        ):
            self.db.delete(team)
        logger.info(f"Deleted team {team_id}")

    def add_member(self, team_id: int, member_data: TeamMemberAdd) -> TeamMember:
        """Put a participant on a team; they must represent the team's institute"""
        team = self.get_team(team_id)
        participant = (
            self.db.query(Participant)
            .filter(Participant.id == member_data.participant_id)
            .first()
        )
        if participant is None:
            raise NotFoundError("Participant not found.")
        if participant.institute_id != team.institute_id:
            logger.warning(
                f"Rejected participant {participant.id} for team {team_id}: "
                f"institute {participant.institute_id} != {team.institute_id}"
            )
            raise ValidationError("Participant must belong to the team's institute.")

        member = TeamMember(team_id=team_id, participant_id=participant.id)
        with write_transaction(
            self.db,
            duplicate_message="Participant is already on this team.",
            failure_message="Adding the team member failed due to a database error.",
        ):
            self.db.add(member)
        self.db.refresh(member)
        return member

    def remove_member(self, team_id: int, participant_id: int) -> None:
        self.get_team(team_id)
        member = (
            self.db.query(TeamMember)
            .filter(TeamMember.team_id == team_id, TeamMember.participant_id == participant_id)
            .first()
        )
        if member is None:
            raise NotFoundError("Participant is not on this team.")
        with write_transaction(
            self.db, failure_message="Removing the team member failed due to a database error."
        ):
            self.db.delete(member)
