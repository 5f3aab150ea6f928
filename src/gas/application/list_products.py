"""Application service: List Products use case (query)."""

from __future__ import annotations

from gas.domain.model.product import Product
from gas.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, supplier_id: str | None = None) -> list[Product]:
        if supplier_id is None:
            products = self._product_repo.list_all()
        else:
            products = self._product_repo.list_by_supplier(supplier_id)
        return sorted(products, key=lambda p: p.id or "")
