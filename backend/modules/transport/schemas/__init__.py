"""Transport schemas module"""

from .transport_schemas import (
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

__all__ = [
    "RouteCreate",
    "RouteOut",
    "RouteUpdate",
    "ScheduleCreate",
    "ScheduleOut",
    "ScheduleUpdate",
    "VehicleCreate",
    "VehicleOut",
    "VehicleUpdate",
]
