# backend/modules/equipment/tests/test_equipment_schemas.py

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from modules.equipment.schemas import (
    CheckoutCreate,
    CheckoutRecord,
    EquipmentItemCreate,
    ReturnRequest,
)


class TestCheckoutCreate:
    def test_snake_and_camel_case_are_equivalent(self):
        snake = CheckoutCreate.model_validate({"item_id": 7, "staff_id": 3})
        camel = CheckoutCreate.model_validate({"itemId": 7, "staffId": 3})

        assert snake == camel

    def test_blank_notes_become_none(self):
        checkout = CheckoutCreate(item_id=1, staff_id=2, notes="   ")
        assert checkout.notes is None

    def test_staff_required(self):
        with pytest.raises(ValidationError):
            CheckoutCreate.model_validate({"itemId": 7})


class TestReturnRequest:
    def test_camel_case_checkout_id(self):
        assert ReturnRequest.model_validate({"checkoutId": 5}).checkout_id == 5

    def test_checkout_id_required(self):
        with pytest.raises(ValidationError):
            ReturnRequest.model_validate({})


class TestEquipmentItemCreate:
    def test_item_code_is_stripped(self):
        item = EquipmentItemCreate(type_id=1, item_code="  CONE-01 ")
        assert item.item_code == "CONE-01"

    def test_blank_item_code_rejected(self):
        with pytest.raises(ValidationError):
            EquipmentItemCreate(type_id=1, item_code="   ")

    def test_purchase_date_alias(self):
        item = EquipmentItemCreate.model_validate(
            {"typeId": 1, "itemCode": "BALL-3", "purchaseDate": "2024-08-01"}
        )
        assert item.purchase_date.isoformat() == "2024-08-01"


class TestCheckoutRecord:
    def test_naive_timestamps_are_read_as_utc(self):
        record = CheckoutRecord(
            id=1,
            item_id=7,
            staff_id=3,
            checkout_time=datetime(2024, 8, 1, 9, 30),
            checkin_time=datetime(2024, 8, 1, 11, 0),
        )

        assert record.checkout_time.tzinfo == timezone.utc
        assert record.checkin_time.tzinfo == timezone.utc

    def test_aware_timestamps_keep_their_offset(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        record = CheckoutRecord(
            id=1, item_id=7, staff_id=3, checkout_time=datetime(2024, 8, 1, 15, 0, tzinfo=ist)
        )

        assert record.checkout_time.utcoffset() == timedelta(hours=5, minutes=30)
        assert record.checkin_time is None
