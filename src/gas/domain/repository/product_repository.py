"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gas.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its identity, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Persist a new product.

        Raises DuplicateEntityError if the identity is already taken;
        this is the uniqueness constraint slug identities rely on.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist an updated product."""

    def list_by_supplier(self, supplier_id: str) -> list[Product]:
        return [p for p in self.list_all() if p.supplier.id == supplier_id]
