# backend/modules/transport/routes/transport_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

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
from ..services import TransportService

router = APIRouter(prefix="/api/logistics/transport", tags=["Transport"])


# Routes
@router.get("/routes", response_model=List[RouteOut])
def list_routes(db: Session = Depends(get_db)):
    return TransportService(db).list_routes()


@router.post("/routes", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_route(route_data: RouteCreate, db: Session = Depends(get_db)):
    route = TransportService(db).create_route(route_data)
    return CreatedResponse(id=route.id, message=f"Route {route.route_name} created successfully.")


@router.put("/routes/{route_id}", response_model=MessageResponse)
def update_route(route_id: int, route_data: RouteUpdate, db: Session = Depends(get_db)):
    TransportService(db).update_route(route_id, route_data)
    return MessageResponse(message=f"Route {route_id} updated successfully.")


@router.delete("/routes/{route_id}", response_model=MessageResponse)
def delete_route(route_id: int, db: Session = Depends(get_db)):
    TransportService(db).delete_route(route_id)
    return MessageResponse(message=f"Route {route_id} deleted successfully.")


# Vehicles
@router.get("/vehicles", response_model=List[VehicleOut])
def list_vehicles(db: Session = Depends(get_db)):
    """Fleet with each vehicle's default route"""
    return TransportService(db).list_vehicles()


@router.post("/vehicles", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_vehicle(vehicle_data: VehicleCreate, db: Session = Depends(get_db)):
    vehicle = TransportService(db).create_vehicle(vehicle_data)
    return CreatedResponse(
        id=vehicle.id, message=f"Vehicle {vehicle.license_plate} registered successfully."
    )


@router.put("/vehicles/{vehicle_id}", response_model=MessageResponse)
def update_vehicle(vehicle_id: int, vehicle_data: VehicleUpdate, db: Session = Depends(get_db)):
    TransportService(db).update_vehicle(vehicle_id, vehicle_data)
    return MessageResponse(message=f"Vehicle {vehicle_id} updated successfully.")


@router.delete("/vehicles/{vehicle_id}", response_model=MessageResponse)
def delete_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    TransportService(db).delete_vehicle(vehicle_id)
    return MessageResponse(message=f"Vehicle {vehicle_id} deleted successfully.")


# Schedules
@router.get("/schedules", response_model=List[ScheduleOut])
def list_schedules(db: Session = Depends(get_db)):
    """Departure board, latest departure first"""
    return TransportService(db).list_schedules()


@router.post("/schedules", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(schedule_data: ScheduleCreate, db: Session = Depends(get_db)):
    schedule = TransportService(db).create_schedule(schedule_data)
    return CreatedResponse(id=schedule.id, message="Schedule created successfully.")


@router.put("/schedules/{schedule_id}", response_model=MessageResponse)
def update_schedule(
    schedule_id: int, schedule_data: ScheduleUpdate, db: Session = Depends(get_db)
):
    TransportService(db).update_schedule(schedule_id, schedule_data)
    return MessageResponse(message=f"Schedule {schedule_id} updated successfully.")


@router.delete("/schedules/{schedule_id}", response_model=MessageResponse)
def delete_schedule(schedule_id: int, db: Session = Depends(get_db)):
    TransportService(db).delete_schedule(schedule_id)
    return MessageResponse(message=f"Schedule {schedule_id} deleted successfully.")
