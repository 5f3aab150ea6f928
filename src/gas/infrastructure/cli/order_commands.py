"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from gas.application.add_product_to_order import AddProductToOrderHandler
from gas.application.create_order import CreateOrderHandler
from gas.domain.exceptions import DomainException
from gas.infrastructure.bootstrap import order_repository, product_repository


@click.command("create")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID.")
@click.option("--discount", default=None, help="Order-wide discount percentage.")
def order_create(supplier_id: str, discount: str | None) -> None:
    """Open a new order for a supplier."""
    handler = CreateOrderHandler(order_repo=order_repository())
    try:
        order = handler.handle(supplier_id=supplier_id, discount=discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} created for supplier '{order.supplier_id}'")


@click.command("add-product")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option(
    "--discount-enabled/--no-discount-enabled",
    default=False,
    help="Apply the product's own discount in this order.",
)
def order_add_product(order_id: int, product_id: str, discount_enabled: bool) -> None:
    """Make a product bookable in an order."""
    handler = AddProductToOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )
    try:
        handler.handle(order_id, product_id, discount_enabled=discount_enabled)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' added to order #{order_id}")
