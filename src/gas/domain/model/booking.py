"""Booking aggregate: what one member booked inside one order."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from gas.domain.model.value_objects import ZERO, Quantity


@dataclass
class BookedProduct:
    """Line item joining a booking to a product."""

    product_id: str
    quantity: Quantity


@dataclass
class Booking:
    """Aggregate root for a member's booking.

    A booking belongs to exactly one order; there is at most one
    line item per product.
    """

    id: int | None
    order_id: int
    user: str
    products: list[BookedProduct] = field(default_factory=list)

    def add_product(self, product_id: str, quantity: Quantity) -> None:
        """Book *quantity* more of a product, merging with an existing line."""
        for line in self.products:
            if line.product_id == product_id:
                line.quantity = line.quantity + quantity
                return
        self.products.append(BookedProduct(product_id=product_id, quantity=quantity))

    def has_product(self, product_id: str) -> bool:
        return any(line.product_id == product_id for line in self.products)

    def quantity_for(self, product_id: str) -> Decimal:
        return sum(
            (line.quantity.value for line in self.products if line.product_id == product_id),
            ZERO,
        )
