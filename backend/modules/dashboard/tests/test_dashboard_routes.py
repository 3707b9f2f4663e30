# backend/modules/dashboard/tests/test_dashboard_routes.py

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from modules.events.models import MatchStatus
from tests.factories import (
    EventFactory,
    InstituteFactory,
    MatchFactory,
    MatchTeamFactory,
    TeamFactory,
)


def _completed_match(event, home, away, home_points, away_points, start_time, summary):
    match = MatchFactory(
        event=event,
        start_time=start_time,
        status=MatchStatus.COMPLETED,
        score_summary=summary,
    )
    MatchTeamFactory(match=match, team=home, points_awarded=home_points)
    MatchTeamFactory(match=match, team=away, points_awarded=away_points)
    return match


class TestStandings:
    def test_points_totalled_per_institute(self, client: TestClient, db_session):
        bombay = InstituteFactory(name="IIT Bombay", short_name="IITB")
        madras = InstituteFactory(name="IIT Madras", short_name="IITM")
        InstituteFactory(name="IIT Delhi", short_name="IITD")
        football = EventFactory(name="Football")
        hockey = EventFactory(name="Hockey")
        kickoff = datetime(2025, 2, 3, 9, 0, tzinfo=timezone.utc)

        _completed_match(
            football,
            TeamFactory(institute=bombay, event=football),
            TeamFactory(institute=madras, event=football),
            3,
            0,
            kickoff,
            "2 - 0",
        )
        _completed_match(
            hockey,
            TeamFactory(institute=bombay, event=hockey),
            TeamFactory(institute=madras, event=hockey),
            1,
            1,
            kickoff + timedelta(hours=3),
            "1 - 1",
        )

        response = client.get("/api/dashboard/standings")

        assert response.status_code == 200
        assert response.json() == [
            {"institute": "IITB", "institute_name": "IIT Bombay", "total_points": 4},
            {"institute": "IITM", "institute_name": "IIT Madras", "total_points": 1},
            {"institute": "IITD", "institute_name": "IIT Delhi", "total_points": 0},
        ]

    def test_scheduled_matches_do_not_count(self, client: TestClient, db_session):
        entry = MatchTeamFactory(points_awarded=5)

        rows = client.get("/api/dashboard/standings").json()

        team_row = next(row for row in rows if row["institute"] == entry.team.institute.short_name)
        assert team_row["total_points"] == 0


class TestMatchCards:
    def test_recent_results_newest_first(self, client: TestClient, db_session):
        event = EventFactory(name="Volleyball")
        falcons = TeamFactory(event=event, team_name="Falcons")
        tigers = TeamFactory(event=event, team_name="Tigers")
        first_day = datetime(2025, 2, 3, 9, 0, tzinfo=timezone.utc)
        older = _completed_match(event, falcons, tigers, 2, 0, first_day, "2 - 0")
        newer = _completed_match(
            event, tigers, falcons, 2, 0, first_day + timedelta(days=1), "2 - 1"
        )
        MatchFactory(event=event)

        rows = client.get("/api/dashboard/recent-results").json()

        assert [row["match_id"] for row in rows] == [newer.id, older.id]
        assert rows[0]["competitors"] == "Tigers vs Falcons"
        assert rows[0]["score_summary"] == "2 - 1"
        assert rows[0]["event_name"] == "Volleyball"

    def test_recent_results_limit(self, client: TestClient, db_session):
        event = EventFactory()
        home = TeamFactory(event=event)
        away = TeamFactory(event=event)
        start = datetime(2025, 2, 3, 9, 0, tzinfo=timezone.utc)
        for day in range(3):
            _completed_match(event, home, away, 1, 1, start + timedelta(days=day), "0 - 0")

        rows = client.get("/api/dashboard/recent-results", params={"limit": 2}).json()

        assert len(rows) == 2

    def test_upcoming_matches_soonest_first(self, client: TestClient, db_session):
        now = datetime.now(timezone.utc)
        soon = MatchFactory(start_time=now + timedelta(hours=2), venue_name="Pool")
        MatchTeamFactory(match=soon, team__team_name="Sharks")
        later = MatchFactory(start_time=now + timedelta(days=2))
        MatchFactory(start_time=now - timedelta(days=1))

        rows = client.get("/api/dashboard/upcoming-matches").json()

        assert [row["match_id"] for row in rows] == [soon.id, later.id]
        assert rows[0]["venue_name"] == "Pool"
        assert rows[0]["competitors"] == "Sharks"
        assert rows[1]["competitors"] is None
        assert rows[0]["start_time"].endswith(("Z", "+00:00"))

    def test_limit_bounds(self, client: TestClient, db_session):
        assert client.get("/api/dashboard/upcoming-matches", params={"limit": 0}).status_code == 400
