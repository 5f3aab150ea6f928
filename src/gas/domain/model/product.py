"""Product aggregate.

Products live independently of orders. A product is a frozen value:
catalog updates and in-memory overrides (e.g. recalculating an order
with a temporarily different price) produce a new Product instead of
mutating the one other code may be holding.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal

from gas.domain.exceptions import ValidationError
from gas.domain.service import pricing
from gas.domain.model.value_objects import (
    ZERO,
    Category,
    Measure,
    Money,
    Supplier,
    parse_percentage,
)

# Numeric fields where zero means "not configured"
OPTIONAL_QUANTITY_FIELDS = (
    "max_available",
    "portion_quantity",
    "min_quantity",
    "max_quantity",
    "multiple",
)


@dataclass(frozen=True)
class Variant:
    """A product variant (size, colour...) with its selectable values."""

    id: str
    name: str
    values: tuple[str, ...] = ()


@dataclass(frozen=True)
class Product:
    """A product in a supplier's catalog.

    ``id`` has the form ``<supplier_id>::<slug>[_<n>]`` and is ``None``
    until the product is first persisted. Once set it never changes.

    Use ``Product.create()`` for new products; ``__init__`` stays simple
    so repositories can reconstitute stored products without re-validating.
    """

    id: str | None
    name: str
    supplier: Supplier
    price: Money
    discount: Decimal | None = None
    measure: Measure | None = None
    category: Category | None = None
    max_available: Decimal = ZERO
    portion_quantity: Decimal = ZERO
    min_quantity: Decimal = ZERO
    max_quantity: Decimal = ZERO
    multiple: Decimal = ZERO
    transport: Money | None = None
    variable: bool = False
    variants: tuple[Variant, ...] = ()

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        supplier: Supplier,
        price: Money,
        discount: str | Decimal | None = None,
        **fields,
    ) -> Product:
        """Create a new, not yet persisted product, enforcing catalog rules."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        product = Product(
            id=None,
            name=name.strip(),
            supplier=supplier,
            price=price,
            discount=parse_percentage(discount),
            **fields,
        )
        product._validate_quantities()
        return product

    # --- Copies ---------------------------------------------------------------

    def with_id(self, product_id: str) -> Product:
        """Return this product with its identity assigned.

        Identity is assigned exactly once; re-assigning is an error.
        """
        if self.id is not None:
            raise ValidationError(
                f"Product '{self.name}' already has identity '{self.id}'"
            )
        return dataclasses.replace(self, id=product_id)

    def with_changes(self, **changes) -> Product:
        """Return a copy with some attributes replaced. Identity is kept."""
        if "id" in changes:
            raise ValidationError("Product identity cannot be changed")
        if "discount" in changes:
            changes["discount"] = parse_percentage(changes["discount"])
        product = dataclasses.replace(self, **changes)
        product._validate_quantities()
        return product

    # --- Computed properties --------------------------------------------------

    @property
    def discount_price(self) -> Decimal:
        """Base price with the product's own discount only.

        Note that this ignores whatever discount the containing order has:
        use the pricing service for the price inside an order.
        """
        return pricing.discount_price(self)

    @property
    def has_availability_cap(self) -> bool:
        return self.max_available != ZERO

    @property
    def is_portioned(self) -> bool:
        return self.portion_quantity != ZERO

    @property
    def has_transport(self) -> bool:
        return self.transport is not None and not self.transport.is_zero

    @property
    def ordered_variants(self) -> list[Variant]:
        return sorted(self.variants, key=lambda v: v.name)

    # --- Internal helpers -----------------------------------------------------

    def _validate_quantities(self) -> None:
        for name in OPTIONAL_QUANTITY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                raise ValidationError(
                    f"{name} must be a Decimal, got {type(value).__name__}"
                )
            if not value.is_finite():
                raise ValidationError(f"{name} must be finite, got {value}")
            if value < ZERO:
                raise ValidationError(f"{name} cannot be negative, got {value}")
