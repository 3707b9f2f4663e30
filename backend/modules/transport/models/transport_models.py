# backend/modules/transport/models/transport_models.py

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from core.database import Base


class TransportRoute(Base):
    """Shuttle route between venues, hostels and the airport"""

    __tablename__ = "transport_routes"

    id = Column(Integer, primary_key=True, index=True)
    route_name = Column(String(150), nullable=False, unique=True)
    description = Column(Text)

    vehicles = relationship(
        "TransportVehicle", back_populates="default_route", passive_deletes="all"
    )


class TransportVehicle(Base):
    __tablename__ = "transport_vehicles"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_name = Column(String(150), nullable=False)
    license_plate = Column(String(20), nullable=False, unique=True)
    capacity = Column(Integer, nullable=False)
    route_id = Column(Integer, ForeignKey("transport_routes.id"), nullable=False)

    default_route = relationship("TransportRoute", back_populates="vehicles")


class TransportSchedule(Base):
    """One departure: a driver (staff member) running a vehicle on a route"""

    __tablename__ = "transport_schedules"

    id = Column(Integer, primary_key=True, index=True)
    staff_id = Column(Integer, ForeignKey("staff_members.id"), nullable=False, index=True)
    route_id = Column(Integer, ForeignKey("transport_routes.id"), nullable=False)
    vehicle_id = Column(Integer, ForeignKey("transport_vehicles.id"), nullable=False)
    departure_time = Column(DateTime, nullable=False, index=True)
