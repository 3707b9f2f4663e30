# backend/modules/equipment/models/equipment_models.py

from enum import Enum

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from core.database import Base


class EquipmentStatus(str, Enum):
    """Status of a physical equipment item"""

    AVAILABLE = "Available"
    ISSUED = "Issued"


class EquipmentType(Base):
    """Category of equipment (Cone, Stopwatch, Football, ...)"""

    __tablename__ = "equipment_types"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)

    items = relationship("EquipmentItem", back_populates="equipment_type", passive_deletes="all")


class EquipmentItem(Base):
    """One physical, individually tracked unit of equipment"""

    __tablename__ = "equipment_items"

    id = Column(Integer, primary_key=True, index=True)
    type_id = Column(Integer, ForeignKey("equipment_types.id"), nullable=False, index=True)
    item_code = Column(String(50), nullable=False, unique=True)
    # Only the checkout/check-in protocol in EquipmentService writes this
    status = Column(
        SQLEnum(
            EquipmentStatus,
            name="equipment_status",
            values_callable=lambda obj: [e.value for e in obj],
        ),
        default=EquipmentStatus.AVAILABLE,
        nullable=False,
    )
    condition = Column(String(100))
    purchase_date = Column(Date)

    equipment_type = relationship("EquipmentType", back_populates="items")
    checkouts = relationship("EquipmentCheckout", back_populates="item", passive_deletes="all")

    __table_args__ = (Index("idx_equipment_item_type_status", "type_id", "status"),)


class EquipmentCheckout(Base):
    """Ledger entry for one lease of an item to a staff member.

    ``checkin_time`` is null while the item is out. A record is closed
    exactly once and never deleted.
    """

    __tablename__ = "equipment_checkouts"

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(Integer, ForeignKey("equipment_items.id"), nullable=False)
    staff_id = Column(Integer, ForeignKey("staff_members.id"), nullable=False, index=True)
    checkout_time = Column(DateTime(timezone=True), nullable=False)
    checkin_time = Column(DateTime(timezone=True))
    notes = Column(Text)

    item = relationship("EquipmentItem", back_populates="checkouts")

    __table_args__ = (
        Index("idx_equipment_checkout_item_open", "item_id", "checkin_time"),
        Index("idx_equipment_checkout_time", "checkout_time"),
    )

    @property
    def is_open(self) -> bool:
        return self.checkin_time is None
