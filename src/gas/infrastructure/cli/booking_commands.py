"""CLI commands for member bookings."""

from __future__ import annotations

import click

from gas.application.book_product import BookProductHandler
from gas.domain.exceptions import DomainException
from gas.infrastructure.bootstrap import (
    booking_repository,
    order_repository,
    product_repository,
)


@click.command("add")
@click.option("--order", "order_id", required=True, type=int, help="Order ID.")
@click.option("--user", required=True, help="Member placing the booking.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, help="Quantity, in portions for portioned products.")
def booking_add(order_id: int, user: str, product_id: str, quantity: str) -> None:
    """Book a quantity of a product in an order."""
    handler = BookProductHandler(
        booking_repo=booking_repository(),
        order_repo=order_repository(),
        product_repo=product_repository(),
    )
    try:
        booking = handler.handle(order_id, user, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Booked {booking.quantity_for(product_id)} of '{product_id}' "
        f"for {booking.user} in order #{order_id}"
    )
