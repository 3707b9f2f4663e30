# backend/modules/teams/tests/test_team_routes.py

from fastapi.testclient import TestClient

from tests.factories import (
    EventFactory,
    InstituteFactory,
    MatchTeamFactory,
    ParticipantFactory,
    TeamFactory,
    TeamMemberFactory,
)


class TestTeams:
    def test_create_team(self, client: TestClient, db_session):
        institute = InstituteFactory(short_name="IITB")
        event = EventFactory(name="Basketball Men")

        response = client.post(
            "/api/teams/",
            json={"teamName": "IITB Hoopers", "instituteId": institute.id, "eventId": event.id},
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Team IITB Hoopers created successfully."

        rows = client.get("/api/teams/").json()
        assert rows == [
            {
                "id": response.json()["id"],
                "team_name": "IITB Hoopers",
                "institute_id": institute.id,
                "institute": "IITB",
                "event_id": event.id,
                "event_name": "Basketball Men",
                "member_count": 0,
            }
        ]

    def test_duplicate_team_name_in_event(self, client: TestClient, db_session):
        team = TeamFactory(team_name="Falcons")

        response = client.post(
            "/api/teams/",
            json={
                "team_name": "Falcons",
                "institute_id": team.institute_id,
                "event_id": team.event_id,
            },
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "UNIQUE_VIOLATION"

    def test_unknown_event(self, client: TestClient, db_session):
        institute = InstituteFactory()

        response = client.post(
            "/api/teams/",
            json={"team_name": "Ghosts", "institute_id": institute.id, "event_id": 999},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Team references an unknown institute or event."

    def test_filter_by_event(self, client: TestClient, db_session):
        chess = EventFactory(name="Chess")
        TeamFactory(event=chess, team_name="Knights")
        TeamFactory(team_name="Strikers")

        rows = client.get("/api/teams/", params={"eventId": chess.id}).json()

        assert [row["team_name"] for row in rows] == ["Knights"]

    def test_rename_team(self, client: TestClient, db_session):
        team = TeamFactory(team_name="Old Name")

        response = client.put(f"/api/teams/{team.id}", json={"teamName": "New Name"})

        assert response.status_code == 200
        assert client.get(f"/api/teams/{team.id}").json()["team_name"] == "New Name"

    def test_missing_team(self, client: TestClient, db_session):
        assert client.get("/api/teams/404").status_code == 404
        assert client.delete("/api/teams/404").status_code == 404

    def test_delete_team_with_members(self, client: TestClient, db_session):
        member = TeamMemberFactory()

        response = client.delete(f"/api/teams/{member.team_id}")

        assert response.status_code == 200
        assert client.get("/api/teams/").json() == []

    def test_delete_team_in_match_refused(self, client: TestClient, db_session):
        entry = MatchTeamFactory()

        response = client.delete(f"/api/teams/{entry.team_id}")

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Deletion failed. Team is scheduled in one or more matches."
        )


class TestRoster:
    def test_add_and_list_members(self, client: TestClient, db_session):
        team = TeamFactory()
        athlete = ParticipantFactory(name="Meera Iyer", institute=team.institute)

        response = client.post(
            f"/api/teams/{team.id}/members", json={"participantId": athlete.id}
        )

        assert response.status_code == 201
        detail = client.get(f"/api/teams/{team.id}").json()
        assert detail["member_count"] == 1
        assert detail["members"] == [
            {"participant_id": athlete.id, "name": "Meera Iyer", "email": athlete.email}
        ]

    def test_member_must_share_institute(self, client: TestClient, db_session):
        team = TeamFactory()
        outsider = ParticipantFactory()

        response = client.post(
            f"/api/teams/{team.id}/members", json={"participant_id": outsider.id}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Participant must belong to the team's institute."

    def test_member_added_once(self, client: TestClient, db_session):
        member = TeamMemberFactory()

        response = client.post(
            f"/api/teams/{member.team_id}/members",
            json={"participant_id": member.participant_id},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Participant is already on this team."

    def test_unknown_participant(self, client: TestClient, db_session):
        team = TeamFactory()

        response = client.post(f"/api/teams/{team.id}/members", json={"participant_id": 999})

        assert response.status_code == 404

    def test_remove_member(self, client: TestClient, db_session):
        member = TeamMemberFactory()

        response = client.delete(
            f"/api/teams/{member.team_id}/members/{member.participant_id}"
        )

        assert response.status_code == 200
        assert client.get(f"/api/teams/{member.team_id}").json()["members"] == []
        assert (
            client.delete(
                f"/api/teams/{member.team_id}/members/{member.participant_id}"
            ).status_code
            == 404
        )

    def test_team_member_cannot_be_deleted_as_participant(self, client: TestClient, db_session):
        member = TeamMemberFactory()

        response = client.delete(f"/api/participants/{member.participant_id}")

        assert response.status_code == 400
        assert "Teams" in response.json()["message"]
