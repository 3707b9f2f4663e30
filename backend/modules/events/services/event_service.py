# backend/modules/events/services/event_service.py

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from core.database_utils import write_transaction
from core.exceptions import InvalidStateError, NotFoundError, StoreFailureError, ValidationError
from modules.teams.models import Team

from ..models import Event, Match, MatchStatus, MatchTeam
from ..schemas import EventCreate, EventLookup, MatchCompetitor, MatchCreate, MatchOut, MatchResult

logger = logging.getLogger(__name__)

RESULT_RECORDED_MESSAGE = "Result already recorded for this match."


def match_to_out(match: Match) -> MatchOut:
    return MatchOut(
        id=match.id,
        event_id=match.event_id,
        event_name=match.event.name,
        venue_name=match.venue_name,
        start_time=match.start_time,
        status=match.status,
        score_summary=match.score_summary,
        teams=[
            MatchCompetitor(
                team_id=competitor.team_id,
                team_name=competitor.team.team_name,
                points_awarded=competitor.points_awarded,
            )
            for competitor in match.competitors
        ],
    )


class EventService:
    def __init__(self, db: Session):
        self.db = db

    def list_lookup(self) -> List[EventLookup]:
        try:
            events = self.db.query(Event).order_by(Event.name).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching event lookup data: {str(e)}")
            raise StoreFailureError("Error fetching event lookup data.")
        return [EventLookup.model_validate(event) for event in events]

    def create_event(self, event_data: EventCreate) -> Event:
        event = Event(**event_data.model_dump())
        with write_transaction(
            self.db, failure_message="Event creation failed due to a database error."
        ):
            self.db.add(event)
        self.db.refresh(event)
        logger.info(f"Created event {event.id} ({event.name})")
        return event

    # Matches
    def _match_query(self):
        return self.db.query(Match).options(
            joinedload(Match.event),
            selectinload(Match.competitors).joinedload(MatchTeam.team),
        )

    def list_matches(self, event_id: Optional[int] = None) -> List[MatchOut]:
        """Fixtures in start order"""
        query = self._match_query()
        if event_id is not None:
            query = query.filter(Match.event_id == event_id)
        try:
            matches = query.order_by(Match.start_time, Match.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching matches: {str(e)}")
            raise StoreFailureError("Failed to fetch match data.")
        return [match_to_out(match) for match in matches]

    def get_match(self, match_id: int) -> MatchOut:
        match = self._match_query().filter(Match.id == match_id).first()
        if match is None:
            raise NotFoundError("Match not found.")
        return match_to_out(match)

    def schedule_match(self, match_data: MatchCreate) -> Match:
        event = self.db.query(Event).filter(Event.id == match_data.event_id).first()
        if event is None:
            raise NotFoundError("Event not found.")

        teams = (
            self.db.query(Team)
            .filter(Team.id.in_(match_data.team_ids), Team.event_id == event.id)
            .all()
        )
        if len(teams) != len(match_data.team_ids):
            raise ValidationError("All teams must be entered in the match's event.")

        match = Match(
            event_id=event.id,
            venue_name=match_data.venue_name or event.venue,
            start_time=match_data.start_time,
            status=MatchStatus.SCHEDULED,
            competitors=[MatchTeam(team_id=team_id) for team_id in match_data.team_ids],
        )
        with write_transaction(
            self.db, failure_message="Match scheduling failed due to a database error."
        ):
            self.db.add(match)
        self.db.refresh(match)
        logger.info(f"Scheduled match {match.id} for event {event.id}")
        return match

    def record_result(self, match_id: int, result: MatchResult) -> Match:
        """
        Complete a scheduled match and award points to its teams.

        A result is recorded once; a second attempt raises InvalidStateError.
        """
        with write_transaction(
            self.db, failure_message="Recording the result failed due to a database error."
        ):
            match = (
                self.db.query(Match).filter(Match.id == match_id).with_for_update().first()
            )
            if match is None:
                raise NotFoundError("Match not found.")
            if match.status != MatchStatus.SCHEDULED:
                raise InvalidStateError(RESULT_RECORDED_MESSAGE)

            competitors = {competitor.team_id: competitor for competitor in match.competitors}
            unknown = [entry.team_id for entry in result.points if entry.team_id not in competitors]
            if unknown:
                raise ValidationError("Points can only be awarded to teams playing this match.")

            completed = (
                self.db.query(Match)
                .filter(Match.id == match_id, Match.status == MatchStatus.SCHEDULED)
                .update(
                    {Match.status: MatchStatus.COMPLETED, Match.score_summary: result.score_summary},
                    synchronize_session=False,
                )
            )
            if completed != 1:
                raise InvalidStateError(RESULT_RECORDED_MESSAGE)

            for entry in result.points:
                competitors[entry.team_id].points_awarded = entry.points

        self.db.refresh(match)
        logger.info(f"Recorded result for match {match_id}: {result.score_summary}")
        return match
