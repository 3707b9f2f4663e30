from .transport_service import TransportService

__all__ = ["TransportService"]
