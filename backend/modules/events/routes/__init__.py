from .event_routes import router

__all__ = ["router"]
