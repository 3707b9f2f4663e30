# backend/modules/equipment/schemas/__init__.py
"""Equipment schemas module"""

from .equipment_schemas import (
    CheckoutCreate,
    CheckoutHistoryEntry,
    CheckoutRecord,
    CheckoutResponse,
    EquipmentItemCreate,
    EquipmentItemOut,
    EquipmentTypeCreate,
    EquipmentTypeSummary,
    ReturnRequest,
)

__all__ = [
    "CheckoutCreate",
    "CheckoutHistoryEntry",
    "CheckoutRecord",
    "CheckoutResponse",
    "EquipmentItemCreate",
    "EquipmentItemOut",
    "EquipmentTypeCreate",
    "EquipmentTypeSummary",
    "ReturnRequest",
]
