"""Application service: put a catalog product into an order.

Adding a product that is already in the order only updates whether
its own discount applies.
"""

from __future__ import annotations

from gas.domain.exceptions import EntityNotFoundError
from gas.domain.repository.order_repository import OrderRepository
from gas.domain.repository.product_repository import ProductRepository


class AddProductToOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: int, product_id: str, discount_enabled: bool = False) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        order.add_product(product, discount_enabled=discount_enabled)
        self._order_repo.save(order)
