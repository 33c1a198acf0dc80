"""Tests for product and activity models."""
import pytest
from pydantic import ValidationError

from src.models.activity import ActivityAction, ActivityLog
from src.models.product import Product, ProductDraft, StockStatus, stock_status


class TestStockStatus:
    """Stock status is derived from quantity alone."""

    @pytest.mark.parametrize("quantity", [0])
    def test_zero_is_out_of_stock(self, quantity):
        assert stock_status(quantity) is StockStatus.OUT_OF_STOCK

    @pytest.mark.parametrize("quantity", [1, 5, 10])
    def test_one_to_ten_is_low(self, quantity):
        assert stock_status(quantity) is StockStatus.LOW_STOCK

    @pytest.mark.parametrize("quantity", [11, 500])
    def test_above_ten_is_in_stock(self, quantity):
        assert stock_status(quantity) is StockStatus.IN_STOCK

    def test_every_quantity_has_exactly_one_status(self):
        for q in range(0, 50):
            matches = [
                q == 0,
                1 <= q <= 10,
                q > 10,
            ]
            assert matches.count(True) == 1
            expected = [StockStatus.OUT_OF_STOCK, StockStatus.LOW_STOCK, StockStatus.IN_STOCK][
                matches.index(True)
            ]
            assert stock_status(q) is expected


class TestProduct:
    def test_missing_description_defaults_to_empty(self):
        p = Product.model_validate({"id": 1, "name": "Widget", "quantity": 3})
        assert p.description == ""

    def test_null_description_becomes_empty(self):
        p = Product.model_validate({"id": 1, "name": "Widget", "description": None, "quantity": 3})
        assert p.description == ""

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            Product.model_validate({"id": 1, "name": "Widget", "quantity": -1})

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Product.model_validate({"id": 1, "quantity": 1})

    def test_extra_fields_ignored(self):
        p = Product.model_validate({"id": "a1", "name": "W", "quantity": 0, "sku": "X"})
        assert p.id == "a1"
        assert p.status is StockStatus.OUT_OF_STOCK


class TestProductDraft:
    def test_from_product_copies_editable_fields(self):
        p = Product(id=7, name="Gadget", description="Blue", quantity=15)
        draft = ProductDraft.from_product(p)
        assert draft.to_payload() == {"name": "Gadget", "description": "Blue", "quantity": 15}

    def test_blank_name_is_invalid(self):
        assert ProductDraft(name="   ", quantity=1).validation_errors() == ["Product name is required."]

    def test_negative_quantity_is_invalid(self):
        errors = ProductDraft(name="Bolt", quantity=-2).validation_errors()
        assert errors == ["Quantity cannot be negative."]

    def test_payload_strips_name(self):
        assert ProductDraft(name="  Bolt ").to_payload()["name"] == "Bolt"


class TestActivityLog:
    def test_newest_entry_first(self):
        log = ActivityLog()
        log.record(ActivityAction.ADDED, "First")
        log.record(ActivityAction.DELETED, "Second")
        assert [e.product for e in log.entries] == ["Second", "First"]
        assert log.entries[0].action is ActivityAction.DELETED

    def test_never_exceeds_limit(self):
        log = ActivityLog(limit=20)
        for i in range(35):
            log.record(ActivityAction.IMPORTED, f"Row {i}")
        assert len(log) == 20
        assert log.entries[0].product == "Row 34"
        assert log.entries[-1].product == "Row 15"

    def test_raw_id_is_stringified(self):
        log = ActivityLog()
        entry = log.record(ActivityAction.DELETED, 42)
        assert entry.product == "42"

    def test_entry_carries_user(self):
        log = ActivityLog(user="Admin")
        assert log.record(ActivityAction.EDITED, "X").user == "Admin"

    def test_action_labels(self):
        assert ActivityAction.MARKED_OUT_OF_STOCK.value == "Marked Out of Stock"
