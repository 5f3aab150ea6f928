"""Order aggregate, as seen from the product catalog.

An order groups the products of one supplier that members can book.
Only the parts the catalog needs live here: the order-wide discount and,
for each product in the order, whether the product's own discount applies.
The order's own lifecycle (opening, closing, shipping) is managed elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from gas.domain.exceptions import ValidationError
from gas.domain.model.product import Product
from gas.domain.model.value_objects import parse_percentage


@dataclass(frozen=True)
class OrderProductPivot:
    """Data attached to the product-in-order relationship itself."""

    discount_enabled: bool = False


@dataclass(frozen=True)
class OrderedProduct:
    """A product together with its relationship data inside one order.

    Built fresh on each lookup; the product it wraps is the caller's
    instance, which is never modified.
    """

    product: Product
    pivot: OrderProductPivot

    @property
    def discount_enabled(self) -> bool:
        return self.pivot.discount_enabled


@dataclass
class Order:
    """Aggregate root for a supplier order.

    ``discount`` is an order-wide percentage, ``None`` when the order has
    no discount. ``products`` maps product ids to their pivot record.
    """

    id: int | None
    supplier_id: str
    discount: Decimal | None = None
    products: dict[str, OrderProductPivot] = field(default_factory=dict)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(supplier_id: str, discount: str | Decimal | None = None) -> Order:
        if not supplier_id or not supplier_id.strip():
            raise ValidationError("Supplier is required")
        return Order(
            id=None,
            supplier_id=supplier_id.strip(),
            discount=parse_percentage(discount),
        )

    # --- Product membership ---------------------------------------------------

    def add_product(self, product: Product, discount_enabled: bool = False) -> None:
        if product.id is None:
            raise ValidationError(f"Product '{product.name}' has not been saved yet")
        if product.supplier.id != self.supplier_id:
            raise ValidationError(
                f"Product '{product.name}' does not belong to supplier '{self.supplier_id}'"
            )
        self.products[product.id] = OrderProductPivot(discount_enabled=discount_enabled)

    def enable_product_discount(self, product_id: str, enabled: bool = True) -> None:
        if product_id not in self.products:
            raise ValidationError(
                f"Product ID '{product_id}' not found in this order"
            )
        self.products[product_id] = OrderProductPivot(discount_enabled=enabled)

    def lookup_product(self, product: Product) -> OrderedProduct | None:
        """Return the product enriched with its pivot data, or None."""
        pivot = self.products.get(product.id) if product.id is not None else None
        if pivot is None:
            return None
        return OrderedProduct(product=product, pivot=pivot)

    def has_product(self, product: Product) -> bool:
        return self.lookup_product(product) is not None
