from .dashboard_routes import router

__all__ = ["router"]
