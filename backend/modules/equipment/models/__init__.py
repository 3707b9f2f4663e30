# backend/modules/equipment/models/__init__.py
"""Equipment models module"""

from .equipment_models import (
    EquipmentCheckout,
    EquipmentItem,
    EquipmentStatus,
    EquipmentType,
)

__all__ = [
    "EquipmentCheckout",
    "EquipmentItem",
    "EquipmentStatus",
    "EquipmentType",
]
