# backend/modules/transport/schemas/transport_schemas.py

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RouteBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    route_name: str = Field(
        ..., min_length=1, max_length=150, validation_alias=AliasChoices("route_name", "routeName")
    )
    description: Optional[str] = None


class RouteCreate(RouteBase):
    pass


class RouteUpdate(RouteBase):
    pass


class RouteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    route_name: str
    description: Optional[str] = None


class VehicleBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    vehicle_name: str = Field(
        ...,
        min_length=1,
        max_length=150,
        validation_alias=AliasChoices("vehicle_name", "vehicleName"),
    )
    license_plate: str = Field(
        ...,
        min_length=1,
        max_length=20,
        validation_alias=AliasChoices("license_plate", "licensePlate"),
    )
    capacity: int = Field(..., gt=0, description="Seats including the driver")
    default_route_id: int = Field(
        ..., validation_alias=AliasChoices("default_route_id", "defaultRouteId", "route_id")
    )


class VehicleCreate(VehicleBase):
    pass


class VehicleUpdate(VehicleBase):
    pass


class VehicleOut(BaseModel):
    """Vehicle joined with its default route"""

    id: int
    vehicle_name: str
    license_plate: str
    capacity: int
    default_route_id: int
    default_route_name: str


class ScheduleBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    staff_id: int = Field(..., validation_alias=AliasChoices("staff_id", "staffId"))
    route_id: int = Field(..., validation_alias=AliasChoices("route_id", "routeId"))
    vehicle_id: int = Field(..., validation_alias=AliasChoices("vehicle_id", "vehicleId"))
    departure_time: datetime = Field(
        ..., validation_alias=AliasChoices("departure_time", "departureTime")
    )


class ScheduleCreate(ScheduleBase):
    pass


class ScheduleUpdate(ScheduleBase):
    pass


class ScheduleOut(BaseModel):
    """Schedule joined with route, driver and vehicle for display"""

    id: int
    departure_time: datetime
    route_id: int
    route_name: str
    staff_id: int
    staff_driver: str
    vehicle_id: int
    vehicle_name: str
    license_plate: str
