# backend/tests/factories/transport.py

from datetime import datetime, timedelta

import factory
from factory import Sequence, SubFactory

from modules.transport.models.transport_models import (
    TransportRoute,
    TransportSchedule,
    TransportVehicle,
)

from .base import BaseFactory
from .staff import StaffMemberFactory


class TransportRouteFactory(BaseFactory):
    class Meta:
        model = TransportRoute

    route_name = Sequence(lambda n: f"Route {n}")
    description = factory.LazyAttribute(lambda obj: f"{obj.route_name} shuttle")


class TransportVehicleFactory(BaseFactory):
    class Meta:
        model = TransportVehicle

    vehicle_name = Sequence(lambda n: f"Bus {n}")
    license_plate = Sequence(lambda n: f"KA-01-{n:04d}")
    capacity = 40
    default_route = SubFactory(TransportRouteFactory)
    route_id = factory.SelfAttribute("default_route.id")


class TransportScheduleFactory(BaseFactory):
    """Departure on the vehicle's default route; one hour apart per instance"""

    class Meta:
        model = TransportSchedule
        exclude = ("driver", "vehicle")

    driver = SubFactory(StaffMemberFactory)
    staff_id = factory.SelfAttribute("driver.id")
    vehicle = SubFactory(TransportVehicleFactory)
    vehicle_id = factory.SelfAttribute("vehicle.id")
    route_id = factory.SelfAttribute("vehicle.route_id")
    departure_time = Sequence(lambda n: datetime(2025, 2, 1, 8, 0) + timedelta(hours=n))
