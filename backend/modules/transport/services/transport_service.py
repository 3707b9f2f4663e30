# backend/modules/transport/services/transport_service.py

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_utils import write_transaction
from core.exceptions import NotFoundError, StoreFailureError
from modules.staff.models import StaffMember

from ..models import TransportRoute, TransportSchedule, TransportVehicle
from ..schemas import (
    RouteCreate,
    RouteOut,
    RouteUpdate,
    ScheduleCreate,
    ScheduleOut,
    ScheduleUpdate,
    VehicleCreate,
    VehicleOut,
    VehicleUpdate,
)

logger = logging.getLogger(__name__)

ROUTE_IN_USE_MESSAGE = "Deletion failed. Route is referenced by vehicles or schedules."
VEHICLE_IN_USE_MESSAGE = "Deletion failed. Vehicle is referenced by schedules."
SCHEDULE_REFERENCE_MESSAGE = "Schedule references an unknown driver, route or vehicle."


class TransportService:
    """Service for shuttle routes, the vehicle fleet and departure schedules"""

    def __init__(self, db: Session):
        self.db = db

    # Routes
    def list_routes(self) -> List[RouteOut]:
        try:
            routes = self.db.query(TransportRoute).order_by(TransportRoute.route_name).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching transport routes: {str(e)}")
            raise StoreFailureError("Failed to fetch transport routes.")
        return [RouteOut.model_validate(route) for route in routes]

    def get_route(self, route_id: int) -> TransportRoute:
        route = self.db.query(TransportRoute).filter(TransportRoute.id == route_id).first()
        if not route:
            raise NotFoundError(f"Route {route_id} not found.")
        return route

    def create_route(self, route_data: RouteCreate) -> TransportRoute:
        route = TransportRoute(**route_data.model_dump())
        with write_transaction(
            self.db,
            duplicate_message=f"Route {route_data.route_name} already exists.",
            failure_message="Route creation failed due to a database error.",
        ):
            self.db.add(route)
        self.db.refresh(route)
        return route

    def update_route(self, route_id: int, route_data: RouteUpdate) -> TransportRoute:
        route = self.get_route(route_id)
        with write_transaction(
            self.db,
            duplicate_message=f"Route {route_data.route_name} already exists.",
            failure_message="Route update failed due to a database error.",
        ):
            for field, value in route_data.model_dump().items():
                setattr(route, field, value)
        self.db.refresh(route)
        return route

    def delete_route(self, route_id: int) -> None:
        route = self.get_route(route_id)
        with write_transaction(
            self.db,
            reference_message=ROUTE_IN_USE_MESSAGE,
            failure_message="Route deletion failed due to a database error.",
        ):
            self.db.delete(route)
        logger.info(f"Deleted transport route {route_id}")

    # Vehicles
    def list_vehicles(self) -> List[VehicleOut]:
        """Fleet joined with each vehicle's default route"""
        try:
            rows = (
                self.db.query(
                    TransportVehicle.id,
                    TransportVehicle.vehicle_name,
                    TransportVehicle.license_plate,
                    TransportVehicle.capacity,
                    TransportVehicle.route_id.label("default_route_id"),
                    TransportRoute.route_name.label("default_route_name"),
                )
                .join(TransportRoute, TransportVehicle.route_id == TransportRoute.id)
                .order_by(TransportVehicle.vehicle_name)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching vehicles: {str(e)}")
            raise StoreFailureError("Failed to fetch vehicle data.")
        return [VehicleOut.model_validate(dict(row._mapping)) for row in rows]

    def get_vehicle(self, vehicle_id: int) -> TransportVehicle:
        vehicle = (
            self.db.query(TransportVehicle).filter(TransportVehicle.id == vehicle_id).first()
        )
        if not vehicle:
            raise NotFoundError(f"Vehicle {vehicle_id} not found.")
        return vehicle

    def create_vehicle(self, vehicle_data: VehicleCreate) -> TransportVehicle:
        vehicle = TransportVehicle(**self._vehicle_columns(vehicle_data))
        with write_transaction(
            self.db,
            duplicate_message=f"License plate {vehicle_data.license_plate} already registered.",
            reference_message="Default route does not exist.",
            failure_message="Vehicle registration failed due to a database error.",
        ):
            self.db.add(vehicle)
        self.db.refresh(vehicle)
        logger.info(f"Registered vehicle {vehicle.id} ({vehicle.license_plate})")
        return vehicle

    def update_vehicle(
        self, vehicle_id: int, vehicle_data: VehicleUpdate
    ) -> TransportVehicle:
        vehicle = self.get_vehicle(vehicle_id)
        with write_transaction(
            self.db,
            duplicate_message=f"License plate {vehicle_data.license_plate} already registered.",
            reference_message="Default route does not exist.",
            failure_message="Vehicle update failed due to a database error.",
        ):
            for field, value in self._vehicle_columns(vehicle_data).items():
                setattr(vehicle, field, value)
        self.db.refresh(vehicle)
        return vehicle

    def delete_vehicle(self, vehicle_id: int) -> None:
        vehicle = self.get_vehicle(vehicle_id)
        with write_transaction(
            self.db,
            reference_message=VEHICLE_IN_USE_MESSAGE,
            failure_message="Vehicle deletion failed due to a database error.",
        ):
            self.db.delete(vehicle)
        logger.info(f"Deleted vehicle {vehicle_id}")

    @staticmethod
    def _vehicle_columns(vehicle_data) -> dict:
        data = vehicle_data.model_dump()
        data["route_id"] = data.pop("default_route_id")
        return data

    # Schedules
    def list_schedules(self) -> List[ScheduleOut]:
        """Departures joined with route, driver and vehicle, latest first"""
        try:
            rows = (
                self.db.query(
                    TransportSchedule.id,
                    TransportSchedule.departure_time,
                    TransportSchedule.route_id,
                    TransportRoute.route_name,
                    TransportSchedule.staff_id,
                    StaffMember.name.label("staff_driver"),
                    TransportSchedule.vehicle_id,
                    TransportVehicle.vehicle_name,
                    TransportVehicle.license_plate,
                )
                .join(TransportRoute, TransportSchedule.route_id == TransportRoute.id)
                .join(StaffMember, TransportSchedule.staff_id == StaffMember.id)
                .join(TransportVehicle, TransportSchedule.vehicle_id == TransportVehicle.id)
                .order_by(TransportSchedule.departure_time.desc(), TransportSchedule.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching schedules: {str(e)}")
            raise StoreFailureError("Failed to fetch schedule data.")
        return [ScheduleOut.model_validate(dict(row._mapping)) for row in rows]

    def get_schedule(self, schedule_id: int) -> TransportSchedule:
        schedule = (
            self.db.query(TransportSchedule)
            .filter(TransportSchedule.id == schedule_id)
            .first()
        )
        if not schedule:
            raise NotFoundError(f"Schedule {schedule_id} not found.")
        return schedule

    def create_schedule(self, schedule_data: ScheduleCreate) -> TransportSchedule:
        schedule = TransportSchedule(**schedule_data.model_dump())
        with write_transaction(
            self.db,
            reference_message=SCHEDULE_REFERENCE_MESSAGE,
            failure_message="Schedule creation failed due to a database error.",
        ):
            self.db.add(schedule)
        self.db.refresh(schedule)
        return schedule

    def update_schedule(
        self, schedule_id: int, schedule_data: ScheduleUpdate
    ) -> TransportSchedule:
        schedule = self.get_schedule(schedule_id)
        with write_transaction(
            self.db,
            reference_message=SCHEDULE_REFERENCE_MESSAGE,
            failure_message="Schedule update failed due to a database error.",
        ):
            for field, value in schedule_data.model_dump().items():
                setattr(schedule, field, value)
        self.db.refresh(schedule)
        return schedule

    def delete_schedule(self, schedule_id: int) -> None:
        schedule = self.get_schedule(schedule_id)
        with write_transaction(
            self.db, failure_message="Schedule deletion failed due to a database error."
        ):
            self.db.delete(schedule)
