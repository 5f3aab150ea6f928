"""Abstract repository for Booking aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from gas.domain.model.booking import Booking


class BookingRepository(ABC):

    @abstractmethod
    def get_for_user(self, order_id: int, user: str) -> Booking | None:
        """Return the booking of *user* in an order, or None."""

    @abstractmethod
    def list_by_order(self, order_id: int) -> list[Booking]:
        """Return every booking belonging to an order."""

    @abstractmethod
    def sum_quantity(self, product_id: str, order_id: int) -> Decimal:
        """Total booked quantity of a product across an order's bookings."""

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """Persist a new or updated booking."""
