"""Application service: Book Product use case.

A member books a quantity of a product that is part of an order. Each
member has one booking per order; booking the same product again adds
to the quantity already booked.

Availability is not enforced here: overbooking shows up as a negative
remaining quantity in the product details.
"""

from __future__ import annotations

from gas.domain.exceptions import EntityNotFoundError, ValidationError
from gas.domain.model.booking import Booking
from gas.domain.model.value_objects import Quantity
from gas.domain.repository.booking_repository import BookingRepository
from gas.domain.repository.order_repository import OrderRepository
from gas.domain.repository.product_repository import ProductRepository


class BookProductHandler:

    def __init__(
        self,
        booking_repo: BookingRepository,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._booking_repo = booking_repo
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, user: str, product_id: str, quantity: str) -> Booking:
        if not user or not user.strip():
            raise ValidationError("User is required")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not order.has_product(product):
            raise ValidationError(
                f"Product '{product.name}' is not part of order #{order_id}"
            )

        booking = self._booking_repo.get_for_user(order_id, user.strip())
        if booking is None:
            booking = Booking(id=None, order_id=order_id, user=user.strip())

        booking.add_product(product_id, Quantity.of(quantity))
        self._booking_repo.save(booking)
        return booking
