"""Application service: Create Order use case."""

from __future__ import annotations

from decimal import Decimal

from gas.domain.model.order import Order
from gas.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, supplier_id: str, discount: str | Decimal | None = None) -> Order:
        """Open a new order for a supplier, with an optional order-wide discount."""
        order = Order.create(supplier_id=supplier_id, discount=discount)
        self._order_repo.save(order)
        return order
