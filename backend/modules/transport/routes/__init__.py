from .transport_routes import router

__all__ = ["router"]
