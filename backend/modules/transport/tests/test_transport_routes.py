# backend/modules/transport/tests/test_transport_routes.py

from fastapi.testclient import TestClient

from tests.factories import (
    StaffMemberFactory,
    TransportRouteFactory,
    TransportScheduleFactory,
    TransportVehicleFactory,
)

BASE = "/api/logistics/transport"


class TestRoutes:
    def test_create_and_list(self, client: TestClient, db_session):
        response = client.post(
            f"{BASE}/routes",
            json={"routeName": "Campus Loop", "description": "Hostels to stadium"},
        )
        assert response.status_code == 201
        assert response.json()["message"] == "Route Campus Loop created successfully."

        rows = client.get(f"{BASE}/routes").json()
        assert rows == [
            {"id": response.json()["id"], "route_name": "Campus Loop", "description": "Hostels to stadium"}
        ]

    def test_duplicate_route_name(self, client: TestClient, db_session):
        TransportRouteFactory(route_name="Airport Shuttle")

        response = client.post(f"{BASE}/routes", json={"route_name": "Airport Shuttle"})

        assert response.status_code == 400
        assert response.json()["message"] == "Route Airport Shuttle already exists."

    def test_update_route(self, client: TestClient, db_session):
        route = TransportRouteFactory()

        response = client.put(
            f"{BASE}/routes/{route.id}", json={"route_name": "Night Loop"}
        )

        assert response.status_code == 200
        assert client.get(f"{BASE}/routes").json()[0]["route_name"] == "Night Loop"

    def test_delete_route_in_use_refused(self, client: TestClient, db_session):
        vehicle = TransportVehicleFactory()

        response = client.delete(f"{BASE}/routes/{vehicle.route_id}")

        assert response.status_code == 400
        assert response.json()["error_code"] == "FOREIGN_KEY_VIOLATION"

    def test_delete_missing_route(self, client: TestClient, db_session):
        assert client.delete(f"{BASE}/routes/77").status_code == 404


class TestVehicles:
    def test_register_vehicle(self, client: TestClient, db_session):
        route = TransportRouteFactory(route_name="Campus Loop")

        response = client.post(
            f"{BASE}/vehicles",
            json={
                "vehicleName": "Blue Bus",
                "licensePlate": "KA-05-1234",
                "capacity": 42,
                "defaultRouteId": route.id,
            },
        )
        assert response.status_code == 201

        rows = client.get(f"{BASE}/vehicles").json()
        assert rows[0]["default_route_name"] == "Campus Loop"
        assert rows[0]["default_route_id"] == route.id

    def test_capacity_must_be_positive(self, client: TestClient, db_session):
        route = TransportRouteFactory()

        response = client.post(
            f"{BASE}/vehicles",
            json={
                "vehicle_name": "Van",
                "license_plate": "KA-05-0001",
                "capacity": 0,
                "default_route_id": route.id,
            },
        )

        assert response.status_code == 400

    def test_duplicate_plate(self, client: TestClient, db_session):
        vehicle = TransportVehicleFactory()

        response = client.post(
            f"{BASE}/vehicles",
            json={
                "vehicle_name": "Spare",
                "license_plate": vehicle.license_plate,
                "capacity": 10,
                "default_route_id": vehicle.route_id,
            },
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "UNIQUE_VIOLATION"

    def test_update_and_delete_vehicle(self, client: TestClient, db_session):
        vehicle = TransportVehicleFactory()
        other_route = TransportRouteFactory()

        updated = client.put(
            f"{BASE}/vehicles/{vehicle.id}",
            json={
                "vehicle_name": "Renamed",
                "license_plate": vehicle.license_plate,
                "capacity": 12,
                "default_route_id": other_route.id,
            },
        )
        assert updated.status_code == 200
        assert client.get(f"{BASE}/vehicles").json()[0]["default_route_id"] == other_route.id

        assert client.delete(f"{BASE}/vehicles/{vehicle.id}").status_code == 200
        assert client.get(f"{BASE}/vehicles").json() == []


class TestSchedules:
    def test_schedule_board_latest_first(self, client: TestClient, db_session):
        first = TransportScheduleFactory()
        second = TransportScheduleFactory()

        rows = client.get(f"{BASE}/schedules").json()

        assert [row["id"] for row in rows] == [second.id, first.id]
        assert rows[0]["staff_driver"]
        assert rows[0]["license_plate"]

    def test_create_schedule(self, client: TestClient, db_session):
        driver = StaffMemberFactory()
        vehicle = TransportVehicleFactory()

        response = client.post(
            f"{BASE}/schedules",
            json={
                "staffId": driver.id,
                "routeId": vehicle.route_id,
                "vehicleId": vehicle.id,
                "departureTime": "2025-02-03T07:30:00",
            },
        )

        assert response.status_code == 201
        assert response.json()["message"] == "Schedule created successfully."

    def test_schedule_with_unknown_driver(self, client: TestClient, db_session):
        vehicle = TransportVehicleFactory()

        response = client.post(
            f"{BASE}/schedules",
            json={
                "staff_id": 999,
                "route_id": vehicle.route_id,
                "vehicle_id": vehicle.id,
                "departure_time": "2025-02-03T07:30:00",
            },
        )

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Schedule references an unknown driver, route or vehicle."
        )

    def test_delete_schedule_releases_vehicle(self, client: TestClient, db_session):
        schedule = TransportScheduleFactory()

        assert client.delete(f"{BASE}/schedules/{schedule.id}").status_code == 200
        assert client.delete(f"{BASE}/vehicles/{schedule.vehicle_id}").status_code == 200
