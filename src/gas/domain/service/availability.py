"""Domain service: remaining availability of a product inside an order.

A product may cap the total quantity that can be booked in one order
(``max_available``, in measure units). Bookings of portioned products
are counted in portions and converted to measure units before being
compared with the cap.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from gas.domain.model.booking import Booking
from gas.domain.model.order import Order
from gas.domain.model.product import Product
from gas.domain.model.value_objects import ZERO
from gas.domain.repository.booking_repository import BookingRepository

logger = logging.getLogger(__name__)


class AvailabilityService:

    def __init__(self, booking_repo: BookingRepository) -> None:
        self._booking_repo = booking_repo

    def still_available(self, product: Product, order: Order) -> Decimal:
        """Quantity of *product* that can still be booked in *order*.

        Returns zero for products without a cap: check
        ``product.has_availability_cap`` before reading zero as sold out.
        The result is not clamped, a negative value means the order is
        overbooked.
        """
        if product.max_available == ZERO:
            return ZERO

        quantity = self._booking_repo.sum_quantity(product.id, order.id)
        if product.portion_quantity != ZERO:
            quantity *= product.portion_quantity

        remaining = product.max_available - quantity
        if remaining < ZERO:
            logger.warning(
                "Product %s overbooked in order %s by %s",
                product.id, order.id, -remaining,
            )
        return remaining

    def bookings_in_order(self, product: Product, order: Order) -> list[Booking]:
        """Bookings of *order* that contain *product*."""
        return [
            booking
            for booking in self._booking_repo.list_by_order(order.id)
            if booking.has_product(product.id)
        ]
