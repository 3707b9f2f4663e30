# backend/modules/dashboard/services/dashboard_service.py

"""
Dashboard read models.

Standings total the points awarded to each institute's teams in completed
matches; every institute is listed, with zero when it has none.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from core.exceptions import StoreFailureError
from modules.events.models import Match, MatchStatus, MatchTeam
from modules.participants.models import Institute
from modules.teams.models import Team

from ..schemas import InstituteStanding, MatchCard

logger = logging.getLogger(__name__)


class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    def get_standings(self) -> List[InstituteStanding]:
        """Institutes by total points, highest first; ties by short name"""
        points = func.coalesce(
            func.sum(
                case(
                    (Match.status == MatchStatus.COMPLETED, MatchTeam.points_awarded),
                    else_=0,
                )
            ),
            0,
        )
        try:
            rows = (
                self.db.query(
                    Institute.short_name.label("institute"),
                    Institute.name.label("institute_name"),
                    points.label("total_points"),
                )
                .outerjoin(Team, Team.institute_id == Institute.id)
                .outerjoin(MatchTeam, MatchTeam.team_id == Team.id)
                .outerjoin(Match, MatchTeam.match_id == Match.id)
                .group_by(Institute.id, Institute.short_name, Institute.name)
                .order_by(points.desc(), Institute.short_name)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching standings: {str(e)}")
            raise StoreFailureError("Failed to fetch standings.")
        return [InstituteStanding.model_validate(dict(row._mapping)) for row in rows]

    def get_recent_results(self, limit: int = 5) -> List[MatchCard]:
        """Completed matches, most recent first"""
        query = (
            self._card_query()
            .filter(Match.status == MatchStatus.COMPLETED)
            .order_by(Match.start_time.desc(), Match.id.desc())
        )
        return self._cards(query.limit(limit), "recent results")

    def get_upcoming_matches(
        self, limit: int = 5, now: Optional[datetime] = None
    ) -> List[MatchCard]:
        """Scheduled matches that have not started, soonest first"""
        now = now or datetime.now(timezone.utc)
        query = (
            self._card_query()
            .filter(Match.status == MatchStatus.SCHEDULED, Match.start_time >= now)
            .order_by(Match.start_time, Match.id)
        )
        return self._cards(query.limit(limit), "upcoming matches")

    def _card_query(self):
        return self.db.query(Match).options(
            joinedload(Match.event),
            selectinload(Match.competitors).joinedload(MatchTeam.team),
        )

    def _cards(self, query, label: str) -> List[MatchCard]:
        try:
            matches = query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching {label}: {str(e)}")
            raise StoreFailureError(f"Failed to fetch {label}.")

        return [
            MatchCard(
                match_id=match.id,
                event_name=match.event.name,
                venue_name=match.venue_name,
                start_time=match.start_time,
                competitors=" vs ".join(c.team.team_name for c in match.competitors) or None,
                score_summary=match.score_summary,
            )
            for match in matches
        ]
