# backend/modules/equipment/schemas/equipment_schemas.py

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models import EquipmentStatus


class EquipmentTypeCreate(BaseModel):
    """Schema for provisioning an equipment type"""

    name: str = Field(..., min_length=1, max_length=100, description="Type name")


class EquipmentTypeSummary(BaseModel):
    """Equipment type with stock counts for the logistics overview"""

    id: int
    name: str
    total_items: int = 0
    available_items: int = 0
    in_use_items: int = 0


class EquipmentItemCreate(BaseModel):
    """Schema for provisioning an equipment item; items always start Available"""

    model_config = ConfigDict(populate_by_name=True)

    type_id: int = Field(..., validation_alias=AliasChoices("type_id", "typeId"))
    item_code: str = Field(
        ...,
        min_length=1,
        max_length=50,
        validation_alias=AliasChoices("item_code", "itemCode"),
    )
    condition: Optional[str] = Field(None, max_length=100)
    purchase_date: Optional[date] = Field(
        None, validation_alias=AliasChoices("purchase_date", "purchaseDate")
    )

    @field_validator("item_code")
    def strip_item_code(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Item code cannot be blank")
        return v


class EquipmentItemOut(BaseModel):
    """Inventory row: item joined with its type"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    type_id: int
    type_name: str
    item_code: str
    status: EquipmentStatus
    condition: Optional[str] = None
    purchase_date: Optional[date] = None


class CheckoutCreate(BaseModel):
    """Checkout request; the UI sends snake_case, older screens camelCase"""

    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(..., validation_alias=AliasChoices("item_id", "itemId"))
    staff_id: int = Field(..., validation_alias=AliasChoices("staff_id", "staffId"))
    notes: Optional[str] = None

    @field_validator("notes")
    def blank_notes_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class ReturnRequest(BaseModel):
    """Check-in addressed by checkout record"""

    model_config = ConfigDict(populate_by_name=True)

    checkout_id: int = Field(
        ..., validation_alias=AliasChoices("checkout_id", "checkoutId")
    )


class CheckoutResponse(BaseModel):
    id: int
    message: str


class CheckoutRecord(BaseModel):
    """Ledger entry as stored"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    item_id: int
    staff_id: int
    checkout_time: datetime
    checkin_time: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("checkout_time", "checkin_time")
    def assume_utc(cls, v):
        # SQLite hands back naive values for timezone-aware columns
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class CheckoutHistoryEntry(CheckoutRecord):
    """Ledger entry joined with item, type and staff for display"""

    item_code: str
    type_name: str
    staff_name: str
    is_active: bool = False
