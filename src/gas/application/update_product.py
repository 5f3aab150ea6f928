"""Application service: Update Product use case."""

from __future__ import annotations

from gas.domain.exceptions import EntityNotFoundError, ValidationError
from gas.domain.model.product import OPTIONAL_QUANTITY_FIELDS, Product
from gas.domain.model.value_objects import Money, to_decimal
from gas.domain.repository.product_repository import ProductRepository

_EDITABLE_FIELDS = {"name", "price", "discount", "transport", "variable", *OPTIONAL_QUANTITY_FIELDS}


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, **changes: str | bool | None) -> Product:
        """Update catalog attributes of a product.

        The identity stays the one assigned at creation, even when the
        name changes.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        updated = product.with_changes(**self._convert(changes))
        self._product_repo.save(updated)
        return updated

    @staticmethod
    def _convert(changes: dict) -> dict:
        converted = {}
        for name, raw in changes.items():
            if name == "price":
                converted[name] = Money.of(raw)
            elif name == "transport":
                converted[name] = Money.of(raw) if raw else None
            elif name in OPTIONAL_QUANTITY_FIELDS:
                converted[name] = to_decimal(raw, name)
            elif name == "name":
                if not raw or not str(raw).strip():
                    raise ValidationError("Product name is required")
                converted[name] = str(raw).strip()
            else:
                converted[name] = raw
        return converted
