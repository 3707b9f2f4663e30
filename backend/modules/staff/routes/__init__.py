"""Staff routes module"""

from .staff_routes import router

__all__ = ["router"]
