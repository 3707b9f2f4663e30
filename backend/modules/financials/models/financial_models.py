# backend/modules/financials/models/financial_models.py

from enum import Enum

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    Text,
)
from sqlalchemy.orm import relationship

from core.database import Base


class TransactionType(str, Enum):
    REGISTRATION = "Registration"
    FINE = "Fine"
    SPONSORSHIP = "Sponsorship"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    FAILED = "Failed"


class IncidentSeverity(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def _enum_values(enum_cls):
    return [e.value for e in enum_cls]


class FinancialTransaction(Base):
    """Money received from or charged to a participant for an event"""

    __tablename__ = "financial_transactions"

    id = Column(Integer, primary_key=True, index=True)
    participant_id = Column(
        Integer, ForeignKey("participants.id"), nullable=False, index=True
    )
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    amount = Column(Numeric(10, 2), nullable=False)
    transaction_date = Column(Date, nullable=False, index=True)
    payment_status = Column(
        SQLEnum(PaymentStatus, name="payment_status", values_callable=_enum_values),
        nullable=False,
        default=PaymentStatus.PENDING,
    )
    type = Column(
        SQLEnum(TransactionType, name="transaction_type", values_callable=_enum_values),
        nullable=False,
    )

    participant = relationship("Participant")
    event = relationship("Event")


class IncidentReport(Base):
    """Incident filed by a staff member, optionally involving a participant"""

    __tablename__ = "incident_reports"

    id = Column(Integer, primary_key=True, index=True)
    participant_id = Column(Integer, ForeignKey("participants.id"), index=True)
    staff_id = Column(Integer, ForeignKey("staff_members.id"), nullable=False, index=True)
    time = Column(DateTime(timezone=True), nullable=False, index=True)
    description = Column(Text, nullable=False)
    severity = Column(
        SQLEnum(IncidentSeverity, name="incident_severity", values_callable=_enum_values),
        nullable=False,
    )
    action_taken = Column(Text)

    participant = relationship("Participant")
    reporter = relationship("StaffMember")
