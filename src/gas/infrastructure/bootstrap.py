"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from gas.application.locale import CatalogLocale, get_locale
from gas.infrastructure.config import get_settings
from gas.infrastructure.persistence.json_booking_repository import (
    JsonBookingRepository,
)
from gas.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from gas.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(get_settings().DATA_DIR / "products.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(get_settings().DATA_DIR / "orders.json")


def booking_repository() -> JsonBookingRepository:
    return JsonBookingRepository(get_settings().DATA_DIR / "bookings.json")


def catalog_locale() -> CatalogLocale:
    return get_locale(get_settings().LOCALE)
