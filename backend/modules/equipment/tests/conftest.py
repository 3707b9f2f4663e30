# backend/modules/equipment/tests/conftest.py

import pytest
from sqlalchemy.orm import Session

from modules.equipment.models import EquipmentCheckout, EquipmentItem, EquipmentStatus
from modules.equipment.services import EquipmentService
from tests.factories import EquipmentItemFactory, StaffMemberFactory


@pytest.fixture
def service(db_session: Session) -> EquipmentService:
    return EquipmentService(db_session)


@pytest.fixture
def staff(db_session):
    return StaffMemberFactory(name="Asha Rao")


@pytest.fixture
def other_staff(db_session):
    return StaffMemberFactory(name="Vikram Das")


@pytest.fixture
def item(db_session):
    """An Available item"""
    return EquipmentItemFactory(item_code="STOPWATCH-07")


@pytest.fixture
def assert_ledger_consistent():
    """Factory fixture asserting: Issued exactly when one open record exists"""

    def _assert(db: Session):
        db.expire_all()
        for equipment_item in db.query(EquipmentItem).all():
            open_records = (
                db.query(EquipmentCheckout)
                .filter(
                    EquipmentCheckout.item_id == equipment_item.id,
                    EquipmentCheckout.checkin_time.is_(None),
                )
                .count()
            )
            if equipment_item.status == EquipmentStatus.ISSUED:
                assert open_records == 1, equipment_item.item_code
            else:
                assert open_records == 0, equipment_item.item_code

    return _assert
