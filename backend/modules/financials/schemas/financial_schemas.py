# backend/modules/financials/schemas/financial_schemas.py

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models import IncidentSeverity, PaymentStatus, TransactionType


class TransactionBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    participant_id: int = Field(
        ..., validation_alias=AliasChoices("participant_id", "participantId")
    )
    event_id: int = Field(..., validation_alias=AliasChoices("event_id", "eventId"))
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    transaction_date: date = Field(
        ..., validation_alias=AliasChoices("transaction_date", "transactionDate")
    )
    payment_status: PaymentStatus = Field(
        ..., validation_alias=AliasChoices("payment_status", "paymentStatus")
    )
    type: TransactionType


class TransactionCreate(TransactionBase):
    """Schema for recording a registration fee, fine or sponsorship"""

    pass


class TransactionUpdate(TransactionBase):
    pass


class TransactionOut(BaseModel):
    """Transaction row with participant and event names"""

    id: int
    amount: Decimal
    transaction_date: date
    payment_status: PaymentStatus
    type: TransactionType
    participant_id: int
    participant_name: str
    event_id: int
    event_name: str


class IncidentBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    staff_id: int = Field(..., validation_alias=AliasChoices("staff_id", "staffId"))
    participant_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("participant_id", "participantId")
    )
    description: str = Field(..., min_length=1)
    severity: IncidentSeverity
    action_taken: Optional[str] = Field(
        None, validation_alias=AliasChoices("action_taken", "actionTaken")
    )

    @field_validator("description")
    def description_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Description cannot be blank")
        return v

    @field_validator("action_taken")
    def blank_action_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v


class IncidentCreate(IncidentBase):
    """Schema for filing an incident; the report time is set by the server"""

    pass


class IncidentUpdate(IncidentBase):
    pass


class IncidentOut(BaseModel):
    """Incident row with reporter and, when involved, participant names"""

    id: int
    time: datetime
    description: str
    action_taken: Optional[str] = None
    severity: IncidentSeverity
    participant_id: Optional[int] = None
    participant_name: Optional[str] = None
    staff_id: int
    staff_reporter: str

    @field_validator("time")
    def assume_utc(cls, v):
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
