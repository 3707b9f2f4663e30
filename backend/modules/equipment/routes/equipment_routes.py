# backend/modules/equipment/routes/equipment_routes.py

"""
Equipment logistics routes.

Several paths are registered twice because different admin screens call
different spellings of the same operation.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import (
    CheckoutCreate,
    CheckoutHistoryEntry,
    CheckoutResponse,
    EquipmentItemCreate,
    EquipmentItemOut,
    EquipmentTypeCreate,
    EquipmentTypeSummary,
    ReturnRequest,
)
from ..services import EquipmentService

router = APIRouter(prefix="/api/logistics", tags=["Equipment"])


# Inventory and ledger reads
@router.get("/equipment-types", response_model=List[EquipmentTypeSummary])
def list_equipment_types(db: Session = Depends(get_db)):
    """Equipment types with total / available / in-use counts"""
    return EquipmentService(db).list_equipment_types()


@router.get("/equipment-items", response_model=List[EquipmentItemOut])
@router.get("/equipment/inventory", response_model=List[EquipmentItemOut])
def list_equipment_items(db: Session = Depends(get_db)):
    """Fetch equipment inventory"""
    return EquipmentService(db).list_inventory()


@router.get("/checkout-history", response_model=List[CheckoutHistoryEntry])
@router.get("/equipment/checkouts", response_model=List[CheckoutHistoryEntry])
def list_checkout_history(db: Session = Depends(get_db)):
    """Fetch equipment checkouts, newest first"""
    return EquipmentService(db).list_checkout_history()


# Provisioning
@router.post(
    "/equipment-types", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_equipment_type(type_data: EquipmentTypeCreate, db: Session = Depends(get_db)):
    equipment_type = EquipmentService(db).create_equipment_type(type_data)
    return CreatedResponse(
        id=equipment_type.id,
        message=f"Equipment type {equipment_type.name} created successfully.",
    )


@router.post(
    "/equipment-items", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_equipment_item(item_data: EquipmentItemCreate, db: Session = Depends(get_db)):
    item = EquipmentService(db).create_equipment_item(item_data)
    return CreatedResponse(
        id=item.id, message=f"Equipment item {item.item_code} added successfully."
    )


# Checkout / check-in
@router.post("/checkout", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/equipment/checkout", response_model=CheckoutResponse, status_code=status.HTTP_201_CREATED
)
def checkout_equipment(checkout_data: CheckoutCreate, db: Session = Depends(get_db)):
    """
    Check out an Available item to a staff member.

    Raises:
        400: Item is not available for checkout
        404: Item does not exist
        500: Database error; nothing was changed
    """
    checkout = EquipmentService(db).check_out(checkout_data)
    return CheckoutResponse(
        id=checkout.id,
        message=(
            f"Equipment {checkout.item_id} checked out successfully "
            f"by Staff {checkout.staff_id}."
        ),
    )


@router.post("/return", response_model=MessageResponse)
def return_equipment(return_data: ReturnRequest, db: Session = Depends(get_db)):
    """
    Check in the item held by a checkout record.

    Raises:
        400: The checkout is already closed
        404: Checkout does not exist
    """
    checkout = EquipmentService(db).check_in_checkout(return_data.checkout_id)
    return MessageResponse(message=f"Equipment {checkout.item_id} checked in successfully.")


@router.put("/equipment/checkin/{item_id}", response_model=MessageResponse)
def checkin_equipment(item_id: int, db: Session = Depends(get_db)):
    """
    Check in an item by closing its most recent open checkout.

    Raises:
        400: No active checkout found for this item
    """
    EquipmentService(db).check_in_item(item_id)
    return MessageResponse(message=f"Equipment {item_id} checked in successfully.")
