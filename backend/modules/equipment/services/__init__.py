# backend/modules/equipment/services/__init__.py
"""Equipment services module"""

from .equipment_service import EquipmentService

__all__ = ["EquipmentService"]
