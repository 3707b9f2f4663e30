# backend/modules/staff/tests/test_staff_routes.py

import pytest
from fastapi.testclient import TestClient

from modules.equipment.schemas import CheckoutCreate
from modules.equipment.services import EquipmentService
from tests.factories import EquipmentItemFactory, RoleFactory, StaffMemberFactory


@pytest.fixture
def referee_role(db_session):
    return RoleFactory(name="Referee")


@pytest.fixture
def staff_payload(referee_role):
    return {
        "name": "Meera Iyer",
        "email": "meera.iyer@meet.example.com",
        "phone": "+91-9800011111",
        "dob": "1990-04-12",
        "roleId": referee_role.id,
    }


class TestStaffDirectory:
    def test_register_staff(self, client: TestClient, staff_payload):
        response = client.post("/api/logistics/staff", json=staff_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == (
            f"Staff member Meera Iyer registered successfully. ID: {body['id']}"
        )

    def test_duplicate_email_rejected(self, client: TestClient, staff_payload):
        client.post("/api/logistics/staff", json=staff_payload)
        staff_payload["phone"] = "+91-9800022222"

        response = client.post("/api/logistics/staff", json=staff_payload)

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Registration failed. Email or Phone number already in use."
        )

    def test_unknown_role_rejected(self, client: TestClient, staff_payload):
        staff_payload["roleId"] = 999

        response = client.post("/api/logistics/staff", json=staff_payload)

        assert response.status_code == 400
        assert response.json()["error_code"] == "FOREIGN_KEY_VIOLATION"

    def test_roster_ordered_by_role_then_name(self, client: TestClient, db_session):
        drivers = RoleFactory(name="Driver")
        referees = RoleFactory(name="Referee")
        StaffMemberFactory(name="Zoya", role=referees)
        StaffMemberFactory(name="Arjun", role=referees)
        StaffMemberFactory(name="Kabir", role=drivers)

        rows = client.get("/api/logistics/staff").json()

        assert [(row["role_name"], row["name"]) for row in rows] == [
            ("Driver", "Kabir"),
            ("Referee", "Arjun"),
            ("Referee", "Zoya"),
        ]

    def test_roles_lookup(self, client: TestClient, referee_role):
        response = client.get("/api/logistics/data/roles-list")

        assert response.status_code == 200
        assert response.json() == [{"id": referee_role.id, "name": "Referee"}]

    def test_create_role(self, client: TestClient, db_session):
        response = client.post("/api/logistics/roles", json={"name": "Medic"})
        assert response.status_code == 201

    def test_update_staff(self, client: TestClient, staff_payload):
        staff_id = client.post("/api/logistics/staff", json=staff_payload).json()["id"]
        staff_payload["name"] = "Meera S. Iyer"

        response = client.put(f"/api/logistics/staff/{staff_id}", json=staff_payload)

        assert response.status_code == 200
        names = [row["name"] for row in client.get("/api/logistics/staff").json()]
        assert names == ["Meera S. Iyer"]

    def test_update_missing_staff(self, client: TestClient, staff_payload):
        response = client.put("/api/logistics/staff/404", json=staff_payload)
        assert response.status_code == 404

    def test_delete_staff(self, client: TestClient, db_session):
        staff = StaffMemberFactory()

        response = client.delete(f"/api/logistics/staff/{staff.id}")

        assert response.status_code == 200
        assert client.get("/api/logistics/staff").json() == []

    def test_delete_staff_with_checkouts_refused(self, client: TestClient, db_session):
        staff = StaffMemberFactory()
        item = EquipmentItemFactory()
        EquipmentService(db_session).check_out(
            CheckoutCreate(item_id=item.id, staff_id=staff.id)
        )

        response = client.delete(f"/api/logistics/staff/{staff.id}")

        assert response.status_code == 400
        assert "referenced in other records" in response.json()["message"]
