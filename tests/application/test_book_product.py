"""Integration tests for the BookProduct use case."""

from decimal import Decimal

import pytest

from gas.application.book_product import BookProductHandler
from gas.domain.exceptions import EntityNotFoundError, ValidationError
from gas.domain.model.order import Order
from gas.domain.model.product import Product
from gas.domain.model.value_objects import Money, Supplier
from tests.fakes import FakeBookingRepository, FakeOrderRepository, FakeProductRepository


def _setup():
    supplier = Supplier(id="S1", name="Cascina Bio")
    widget = Product(id="S1::widget", name="Widget", supplier=supplier, price=Money.of("1"))
    other = Product(id="S1::other", name="Other", supplier=supplier, price=Money.of("1"))
    order = Order(id=1, supplier_id="S1")
    order.add_product(widget)

    booking_repo = FakeBookingRepository()
    handler = BookProductHandler(
        booking_repo,
        FakeOrderRepository([order]),
        FakeProductRepository([widget, other]),
    )
    return handler, booking_repo


class TestBookProduct:

    def test_creates_booking(self):
        handler, booking_repo = _setup()
        booking = handler.handle(1, "anna", "S1::widget", "2")
        assert booking.id is not None
        assert booking_repo.sum_quantity("S1::widget", 1) == Decimal("2")

    def test_second_booking_extends_the_first(self):
        handler, booking_repo = _setup()
        first = handler.handle(1, "anna", "S1::widget", "2")
        second = handler.handle(1, "anna", "S1::widget", "1.5")
        assert first.id == second.id
        assert second.quantity_for("S1::widget") == Decimal("3.5")

    def test_different_users_get_different_bookings(self):
        handler, booking_repo = _setup()
        handler.handle(1, "anna", "S1::widget", "2")
        handler.handle(1, "luca", "S1::widget", "1")
        assert len(booking_repo.list_by_order(1)) == 2
        assert booking_repo.sum_quantity("S1::widget", 1) == Decimal("3")

    def test_product_not_in_order(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="not part of order"):
            handler.handle(1, "anna", "S1::other", "1")

    def test_unknown_order(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order #2 not found"):
            handler.handle(2, "anna", "S1::widget", "1")

    def test_zero_quantity(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(1, "anna", "S1::widget", "0")

    @pytest.mark.parametrize("raw", ["nan", "Infinity"])
    def test_non_finite_quantity(self, raw):
        handler, booking_repo = _setup()
        with pytest.raises(ValidationError, match="Invalid quantity"):
            handler.handle(1, "anna", "S1::widget", raw)
        assert booking_repo.list_by_order(1) == []

    def test_user_required(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="User is required"):
            handler.handle(1, " ", "S1::widget", "1")
