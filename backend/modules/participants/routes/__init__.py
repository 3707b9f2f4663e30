from .participant_routes import logistics_router, router

__all__ = ["logistics_router", "router"]
