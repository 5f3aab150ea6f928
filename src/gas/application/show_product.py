"""Application service: Show Product use case (query).

Shows a product as members see it inside one order: prices with the
order's discounts applied, what is left to book, and the display strings.
"""

from __future__ import annotations

from gas.application.dto import ProductInOrderDTO
from gas.application.locale import ITALIAN, CatalogLocale
from gas.application.presentation import ProductPresenter
from gas.domain.exceptions import EntityNotFoundError
from gas.domain.repository.booking_repository import BookingRepository
from gas.domain.repository.order_repository import OrderRepository
from gas.domain.repository.product_repository import ProductRepository
from gas.domain.service.availability import AvailabilityService
from gas.domain.service.pricing import contextual_price


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        booking_repo: BookingRepository,
        locale: CatalogLocale = ITALIAN,
    ) -> None:
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._availability = AvailabilityService(booking_repo)
        self._presenter = ProductPresenter(self._availability, locale)
        self._locale = locale

    def handle(self, product_id: str, order_id: int) -> ProductInOrderDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        still_available = None
        if product.has_availability_cap:
            still_available = self._locale.number(
                self._availability.still_available(product, order)
            )

        return ProductInOrderDTO(
            product_id=product.id,
            name=product.name,
            order_id=order.id,
            unit_price=self._locale.amount(contextual_price(product, order, rectify=False)),
            portion_price=self._locale.amount(contextual_price(product, order)),
            still_available=still_available,
            price_text=self._presenter.printable_price(product, order),
            measure_text=self._presenter.printable_measure(product, verbose=True),
            details_text=self._presenter.printable_details(product, order),
            booked_by=tuple(sorted(
                booking.user
                for booking in self._availability.bookings_in_order(product, order)
            )),
        )
