"""JSON-file-backed implementation of BookingRepository."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from gas.domain.model.booking import BookedProduct, Booking
from gas.domain.model.value_objects import ZERO, Quantity
from gas.domain.repository.booking_repository import BookingRepository


class JsonBookingRepository(BookingRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BookingRepository interface ------------------------------------------

    def get_for_user(self, order_id: int, user: str) -> Booking | None:
        for raw in self._load_raw():
            if raw["order_id"] == order_id and raw["user"] == user:
                return self._to_domain(raw)
        return None

    def list_by_order(self, order_id: int) -> list[Booking]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["order_id"] == order_id
        ]

    def sum_quantity(self, product_id: str, order_id: int) -> Decimal:
        total = ZERO
        for raw in self._load_raw():
            if raw["order_id"] != order_id:
                continue
            for line in raw["products"]:
                if line["product_id"] == product_id:
                    total += Decimal(line["quantity"])
        return total

    def save(self, booking: Booking) -> None:
        bookings = self._load_raw()

        if booking.id is None:
            booking.id = max((b["id"] for b in bookings), default=0) + 1

        replaced = False
        for i, raw in enumerate(bookings):
            if raw["id"] == booking.id:
                bookings[i] = self._to_raw(booking)
                replaced = True
                break
        if not replaced:
            bookings.append(self._to_raw(booking))

        self._persist_raw(bookings)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(booking: Booking) -> dict:
        return {
            "id": booking.id,
            "order_id": booking.order_id,
            "user": booking.user,
            "products": [
                {"product_id": line.product_id, "quantity": str(line.quantity.value)}
                for line in booking.products
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Booking:
        return Booking(
            id=raw["id"],
            order_id=raw["order_id"],
            user=raw["user"],
            products=[
                BookedProduct(
                    product_id=line["product_id"],
                    quantity=Quantity(Decimal(line["quantity"])),
                )
                for line in raw["products"]
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, bookings: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(bookings, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
