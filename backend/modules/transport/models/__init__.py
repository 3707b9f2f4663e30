"""Transport models module"""

from .transport_models import TransportRoute, TransportSchedule, TransportVehicle

__all__ = ["TransportRoute", "TransportSchedule", "TransportVehicle"]
