"""Domain service: product pricing.

Resolves the price of a product, either on its own or in the context of
an order. Prices are plain Decimal amounts in the catalog currency.

Within an order the price is built in this sequence:

1. the product's own discount, only if the order enabled it for that product;
2. the order-wide discount, always, on top of step 1;
3. for portioned products, optionally, multiplication by the portion size
   so the result is the price of one portion instead of one measure unit.

Out-of-range percentages are validated where they enter the system
(``parse_percentage``); nothing here checks them.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from gas.domain.model.value_objects import HUNDRED, ZERO

if TYPE_CHECKING:
    from gas.domain.model.order import Order
    from gas.domain.model.product import Product


def apply_percentage(base: Decimal, percent: Decimal | None) -> Decimal:
    """Take *percent* percent off *base*; no percentage leaves it unchanged."""
    if percent is None:
        return base
    return base - base * percent / HUNDRED


def discount_price(product: Product) -> Decimal:
    """Base price with only the product's own discount applied."""
    return apply_percentage(product.price.amount, product.discount)


def contextual_price(product: Product, order: Order, rectify: bool = True) -> Decimal:
    """Price of *product* inside *order*.

    With ``rectify`` false the result stays per measure unit even for
    portioned products, for callers that show the unit price.
    """
    ordered = order.lookup_product(product)

    if ordered is not None and ordered.discount_enabled:
        price = apply_percentage(product.price.amount, product.discount)
    else:
        price = product.price.amount

    price = apply_percentage(price, order.discount)

    if rectify and product.portion_quantity != ZERO:
        price = price * product.portion_quantity

    return price
