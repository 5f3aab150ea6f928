"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gas.domain.model.value_objects import Category, Measure, Supplier


@dataclass(frozen=True)
class ProductSpec:
    """Input: a new catalog product, numbers still as entered by the user."""

    name: str
    supplier: Supplier
    price: str
    discount: str | None = None
    measure: Measure | None = None
    category: Category | None = None
    max_available: str = "0"
    portion_quantity: str = "0"
    min_quantity: str = "0"
    max_quantity: str = "0"
    multiple: str = "0"
    transport: str | None = None
    variable: bool = False
    variants: dict[str, list[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class ProductInOrderDTO:
    """Output: a product as displayed inside an order."""

    product_id: str
    name: str
    order_id: int
    unit_price: str  # contextual, per measure unit
    portion_price: str  # contextual, per portion when portioned
    still_available: str | None  # None when the product has no cap
    price_text: str
    measure_text: str
    details_text: str
    booked_by: tuple[str, ...] = ()  # members with a booking line for it
