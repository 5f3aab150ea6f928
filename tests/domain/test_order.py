"""Unit tests for the Order aggregate as used by the catalog."""

from decimal import Decimal

import pytest

from gas.domain.exceptions import ValidationError
from gas.domain.model.order import Order, OrderProductPivot
from gas.domain.model.product import Product
from gas.domain.model.value_objects import Money, Supplier

SUPPLIER = Supplier(id="S1", name="Cascina Bio")


def _make_product(product_id: str | None = "S1::miele") -> Product:
    return Product(id=product_id, name="Miele", supplier=SUPPLIER, price=Money.of("10"))


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create("S1", discount="10")
        assert order.id is None
        assert order.supplier_id == "S1"
        assert order.discount == Decimal("10")
        assert order.products == {}

    def test_no_discount(self):
        assert Order.create("S1").discount is None

    def test_supplier_required(self):
        with pytest.raises(ValidationError, match="Supplier is required"):
            Order.create("  ")

    def test_discount_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 100"):
            Order.create("S1", discount="101")


class TestOrderProducts:

    def test_add_product(self):
        order = Order.create("S1")
        order.add_product(_make_product(), discount_enabled=True)
        assert order.products["S1::miele"] == OrderProductPivot(discount_enabled=True)

    def test_unsaved_product_rejected(self):
        with pytest.raises(ValidationError, match="has not been saved"):
            Order.create("S1").add_product(_make_product(product_id=None))

    def test_other_supplier_rejected(self):
        with pytest.raises(ValidationError, match="does not belong"):
            Order.create("S2").add_product(_make_product())

    def test_enable_product_discount(self):
        order = Order.create("S1")
        order.add_product(_make_product())
        order.enable_product_discount("S1::miele")
        assert order.products["S1::miele"].discount_enabled

    def test_enable_discount_for_missing_product_rejected(self):
        with pytest.raises(ValidationError, match="not found in this order"):
            Order.create("S1").enable_product_discount("S1::nope")


class TestLookupProduct:

    def test_lookup_returns_enriched_value(self):
        product = _make_product()
        order = Order.create("S1")
        order.add_product(product, discount_enabled=True)

        ordered = order.lookup_product(product)

        assert ordered is not None
        assert ordered.product is product
        assert ordered.discount_enabled
        assert order.has_product(product)

    def test_lookup_of_absent_product(self):
        order = Order.create("S1")
        assert order.lookup_product(_make_product()) is None
        assert not order.has_product(_make_product())

    def test_lookup_of_unsaved_product(self):
        assert Order.create("S1").lookup_product(_make_product(product_id=None)) is None
