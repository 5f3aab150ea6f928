"""Human-readable price, measure and details strings for a product.

Every optional piece of information is shown only when its value is
nonzero: a product without transport costs shows no transport, a
product without a minimum shows no minimum, and so on.
"""

from __future__ import annotations

from gas.application.locale import ITALIAN, CatalogLocale
from gas.domain.model.order import Order
from gas.domain.model.product import Product
from gas.domain.model.value_objects import ZERO
from gas.domain.service.availability import AvailabilityService
from gas.domain.service.pricing import contextual_price


class ProductPresenter:

    def __init__(
        self,
        availability: AvailabilityService,
        locale: CatalogLocale = ITALIAN,
    ) -> None:
        self._availability = availability
        self._locale = locale

    def printable_price(self, product: Product, order: Order) -> str:
        """Unit price inside the order, e.g. ``"7,20 € / kg"``.

        Portioned products still show the price per measure unit here;
        the portion size is part of ``printable_measure``.
        """
        loc = self._locale
        price = contextual_price(product, order, rectify=False)
        text = f"{loc.amount(price)} / {_measure_name(product)}"

        if product.has_transport:
            text += f" + {loc.amount(product.transport.amount)} {loc.transport_label}"

        if product.variable:
            text += f" {loc.variable_price_note}"

        return text

    def printable_measure(self, product: Product, verbose: bool = False) -> str:
        if product.portion_quantity != ZERO:
            text = f"{self._locale.number(product.portion_quantity)} {_measure_name(product)}"
            if verbose:
                text = f"{self._locale.portion_prefix} {text}"
            return text
        return _measure_name(product)

    def printable_details(self, product: Product, order: Order) -> str:
        loc = self._locale
        details: list[str] = []

        if product.min_quantity != ZERO:
            details.append(f"{loc.minimum_label}: {loc.number(product.min_quantity)}")
        if product.max_quantity != ZERO:
            details.append(f"{loc.maximum_label}: {loc.number(product.max_quantity)}")
        if product.max_available != ZERO:
            remaining = self._availability.still_available(product, order)
            details.append(
                f"{loc.available_label}: {loc.number(remaining)} "
                f"({loc.number(product.max_available)} {loc.total_label})"
            )
        if product.multiple != ZERO:
            details.append(f"{loc.multiple_label}: {loc.number(product.multiple)}")

        return ", ".join(details)


def _measure_name(product: Product) -> str:
    return product.measure.name if product.measure is not None else ""
