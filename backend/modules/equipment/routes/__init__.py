# backend/modules/equipment/routes/__init__.py
"""Equipment routes module"""

from .equipment_routes import router

__all__ = ["router"]
