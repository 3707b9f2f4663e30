# backend/modules/equipment/services/equipment_service.py

"""
Equipment lifecycle management.

An item is ``Issued`` exactly when it has one open checkout record (a
record whose ``checkin_time`` is null). Checkout and check-in each run as a
single transaction: the item row is read under a row lock, and the status
write is a compare-and-set whose rowcount is checked, so two requests
racing for the same item cannot both win. Transient lock errors are
retried from scratch; a retry that finds the item already taken reports
``InvalidStateError``.
"""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_retry import retry_on_lock_error
from core.database_utils import write_transaction
from core.exceptions import InvalidStateError, NotFoundError, StoreFailureError
from modules.staff.models import StaffMember

from ..models import EquipmentCheckout, EquipmentItem, EquipmentStatus, EquipmentType
from ..schemas import (
    CheckoutCreate,
    CheckoutHistoryEntry,
    EquipmentItemCreate,
    EquipmentItemOut,
    EquipmentTypeCreate,
    EquipmentTypeSummary,
)

logger = logging.getLogger(__name__)

NOT_AVAILABLE_MESSAGE = 'Item is not available for checkout (Status must be "Available").'
NO_ACTIVE_CHECKOUT_MESSAGE = "No active checkout found for this item."


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EquipmentService:
    """Service mediating equipment status and the checkout ledger"""

    def __init__(self, db: Session):
        self.db = db

    # Provisioning
    def create_equipment_type(self, type_data: EquipmentTypeCreate) -> EquipmentType:
        equipment_type = EquipmentType(name=type_data.name)
        self._commit_new(
            equipment_type,
            duplicate_message=f"Equipment type {type_data.name} already exists.",
        )
        return equipment_type

    def create_equipment_item(self, item_data: EquipmentItemCreate) -> EquipmentItem:
        """Register a new item; every item enters inventory Available"""
        item = EquipmentItem(**item_data.model_dump(), status=EquipmentStatus.AVAILABLE)
        self._commit_new(
            item, duplicate_message=f"Item code {item_data.item_code} already exists."
        )
        logger.info(f"Provisioned equipment item {item.id} ({item.item_code})")
        return item

    # Read models
    def list_equipment_types(self) -> List[EquipmentTypeSummary]:
        """Equipment types with total, available and in-use item counts"""
        available = func.sum(
            case((EquipmentItem.status == EquipmentStatus.AVAILABLE, 1), else_=0)
        )
        issued = func.sum(
            case((EquipmentItem.status == EquipmentStatus.ISSUED, 1), else_=0)
        )
        try:
            rows = (
                self.db.query(
                    EquipmentType.id,
                    EquipmentType.name,
                    func.count(EquipmentItem.id).label("total_items"),
                    func.coalesce(available, 0).label("available_items"),
                    func.coalesce(issued, 0).label("in_use_items"),
                )
                .outerjoin(EquipmentItem, EquipmentItem.type_id == EquipmentType.id)
                .group_by(EquipmentType.id, EquipmentType.name)
                .order_by(EquipmentType.name)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching equipment types: {str(e)}")
            raise StoreFailureError("Failed to fetch equipment type data.")
        return [EquipmentTypeSummary.model_validate(dict(row._mapping)) for row in rows]

    def list_inventory(self) -> List[EquipmentItemOut]:
        """All items joined with their type, ordered by type name then item code"""
        try:
            rows = (
                self.db.query(
                    EquipmentItem.id,
                    EquipmentItem.type_id,
                    EquipmentType.name.label("type_name"),
                    EquipmentItem.item_code,
                    EquipmentItem.status,
                    EquipmentItem.condition,
                    EquipmentItem.purchase_date,
                )
                .join(EquipmentType, EquipmentItem.type_id == EquipmentType.id)
                .order_by(EquipmentType.name, EquipmentItem.item_code)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching equipment inventory: {str(e)}")
            raise StoreFailureError("Failed to fetch equipment inventory data.")
        return [EquipmentItemOut.model_validate(dict(row._mapping)) for row in rows]

    def list_checkout_history(self) -> List[CheckoutHistoryEntry]:
        """Checkout ledger joined with item, type and staff, newest first"""
        try:
            rows = (
                self.db.query(
                    EquipmentCheckout.id,
                    EquipmentCheckout.item_id,
                    EquipmentCheckout.staff_id,
                    EquipmentCheckout.checkout_time,
                    EquipmentCheckout.checkin_time,
                    EquipmentCheckout.notes,
                    EquipmentItem.item_code,
                    EquipmentType.name.label("type_name"),
                    StaffMember.name.label("staff_name"),
                )
                .join(EquipmentItem, EquipmentCheckout.item_id == EquipmentItem.id)
                .join(EquipmentType, EquipmentItem.type_id == EquipmentType.id)
                .join(StaffMember, EquipmentCheckout.staff_id == StaffMember.id)
                .order_by(EquipmentCheckout.checkout_time.desc(), EquipmentCheckout.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching checkouts: {str(e)}")
            raise StoreFailureError("Failed to fetch checkout data.")

        return [
            CheckoutHistoryEntry.model_validate(
                {**row._mapping, "is_active": row.checkin_time is None}
            )
            for row in rows
        ]

    # Checkout / check-in protocol
    def check_out(self, checkout_data: CheckoutCreate) -> EquipmentCheckout:
        """
        Lease an Available item to a staff member.

        Raises:
            NotFoundError: the item does not exist
            InvalidStateError: the item is not Available
            StoreFailureError: the transaction failed and was rolled back
        """
        try:
            checkout = retry_on_lock_error(self._check_out, checkout_data)
        except SQLAlchemyError as e:
            logger.error(
                f"Error checking out equipment {checkout_data.item_id}: {str(e)}"
            )
            raise StoreFailureError("Equipment checkout failed due to a database error.")

        logger.info(
            f"Equipment {checkout.item_id} checked out to staff {checkout.staff_id} "
            f"(checkout {checkout.id})"
        )
        return checkout

    def check_in_item(self, item_id: int) -> EquipmentCheckout:
        """Close the most recent open checkout of an item"""
        return self._run_check_in(self._check_in_item, item_id)

    def check_in_checkout(self, checkout_id: int) -> EquipmentCheckout:
        """Close a checkout addressed by its own id"""
        return self._run_check_in(self._check_in_checkout, checkout_id)

    def _run_check_in(self, func, identifier: int) -> EquipmentCheckout:
        try:
            checkout = retry_on_lock_error(func, identifier)
        except SQLAlchemyError as e:
            logger.error(f"Error checking in equipment ({identifier}): {str(e)}")
            raise StoreFailureError("Equipment checkin failed due to a database error.")

        logger.info(f"Equipment {checkout.item_id} checked in (checkout {checkout.id})")
        return checkout

    def _check_out(self, checkout_data: CheckoutCreate) -> EquipmentCheckout:
        item_id = checkout_data.item_id
        try:
            item = (
                self.db.query(EquipmentItem)
                .filter(EquipmentItem.id == item_id)
                .with_for_update()
                .first()
            )
            if item is None:
                raise NotFoundError(f"Equipment item {item_id} not found.")
            if item.status != EquipmentStatus.AVAILABLE:
                logger.warning(f"Checkout rejected: equipment {item_id} is {item.status.value}")
                raise InvalidStateError(NOT_AVAILABLE_MESSAGE)

            claimed = (
                self.db.query(EquipmentItem)
                .filter(
                    EquipmentItem.id == item_id,
                    EquipmentItem.status == EquipmentStatus.AVAILABLE,
                )
                .update({EquipmentItem.status: EquipmentStatus.ISSUED}, synchronize_session=False)
            )
            if claimed != 1:
                logger.warning(f"Checkout rejected: equipment {item_id} was issued concurrently")
                raise InvalidStateError(NOT_AVAILABLE_MESSAGE)

            checkout = EquipmentCheckout(
                item_id=item_id,
                staff_id=checkout_data.staff_id,
                notes=checkout_data.notes,
                checkout_time=utcnow(),
            )
            self.db.add(checkout)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(checkout)
        return checkout

    def _check_in_item(self, item_id: int) -> EquipmentCheckout:
        try:
            checkout = (
                self.db.query(EquipmentCheckout)
                .filter(
                    EquipmentCheckout.item_id == item_id,
                    EquipmentCheckout.checkin_time.is_(None),
                )
                .order_by(EquipmentCheckout.checkout_time.desc(), EquipmentCheckout.id.desc())
                .with_for_update()
                .first()
            )
            if checkout is None:
                logger.warning(f"Checkin rejected: equipment {item_id} has no open checkout")
                raise InvalidStateError(NO_ACTIVE_CHECKOUT_MESSAGE)
            self._close_checkout(checkout)
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(checkout)
        return checkout

    def _check_in_checkout(self, checkout_id: int) -> EquipmentCheckout:
        try:
            checkout = (
                self.db.query(EquipmentCheckout)
                .filter(EquipmentCheckout.id == checkout_id)
                .with_for_update()
                .first()
            )
            if checkout is None:
                raise NotFoundError(f"Checkout {checkout_id} not found.")
            if not checkout.is_open:
                logger.warning(f"Checkin rejected: checkout {checkout_id} is already closed")
                raise InvalidStateError(NO_ACTIVE_CHECKOUT_MESSAGE)
            self._close_checkout(checkout)
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(checkout)
        return checkout

    def _close_checkout(self, checkout: EquipmentCheckout) -> None:
        """Close one open record and release the item once none remain open"""
        closed = (
            self.db.query(EquipmentCheckout)
            .filter(
                EquipmentCheckout.id == checkout.id,
                EquipmentCheckout.checkin_time.is_(None),
            )
            .update({EquipmentCheckout.checkin_time: utcnow()}, synchronize_session=False)
        )
        if closed != 1:
            raise InvalidStateError(NO_ACTIVE_CHECKOUT_MESSAGE)

        still_open = (
            self.db.query(EquipmentCheckout.id)
            .filter(
                EquipmentCheckout.item_id == checkout.item_id,
                EquipmentCheckout.checkin_time.is_(None),
            )
            .first()
        )
        if still_open is None:
            self.db.query(EquipmentItem).filter(EquipmentItem.id == checkout.item_id).update(
                {EquipmentItem.status: EquipmentStatus.AVAILABLE}, synchronize_session=False
            )
        else:
            logger.warning(
                f"Equipment {checkout.item_id} stays Issued: checkout {still_open.id} is still open"
            )
        self.db.commit()

    def _commit_new(self, instance, duplicate_message: str) -> None:
        with write_transaction(
            self.db,
            duplicate_message=duplicate_message,
            reference_message="Referenced equipment type does not exist.",
            failure_message="Equipment provisioning failed due to a database error.",
        ):
            self.db.add(instance)
        self.db.refresh(instance)
