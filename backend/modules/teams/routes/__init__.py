from .team_routes import router

__all__ = ["router"]
