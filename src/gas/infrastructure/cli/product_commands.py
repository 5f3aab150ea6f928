"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from gas.application.add_product import AddProductHandler
from gas.application.dto import ProductSpec
from gas.application.list_products import ListProductsHandler
from gas.application.show_product import ShowProductHandler
from gas.application.update_product import UpdateProductHandler
from gas.domain.exceptions import DomainException
from gas.domain.model.value_objects import Category, Measure, Supplier
from gas.infrastructure.bootstrap import (
    booking_repository,
    catalog_locale,
    order_repository,
    product_repository,
)


def _parse_variants(raw: tuple[str, ...]) -> dict[str, list[str]]:
    """Parse ('Size:S,M,L', 'Colour:red') into {name: values}."""
    variants: dict[str, list[str]] = {}
    for item in raw:
        if ":" not in item:
            raise click.BadParameter(
                f"Invalid variant '{item}'. Expected 'Name:value,value'."
            )
        name, values = item.split(":", 1)
        variants[name.strip()] = [v.strip() for v in values.split(",") if v.strip()]
    return variants


def _reference(cls, name: str | None):
    if not name:
        return None
    return cls(id=name.strip().lower(), name=name.strip())


@click.command("add")
@click.option("--supplier", "supplier_id", required=True, help="Supplier ID.")
@click.option("--supplier-name", default=None, help="Supplier display name.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price per measure unit (e.g. 15.00).")
@click.option("--discount", default=None, help="Product discount percentage.")
@click.option("--measure", default=None, help="Measure unit name (e.g. kg).")
@click.option("--category", default=None, help="Category name.")
@click.option("--max-available", default="0", help="Bookable cap per order, 0 for none.")
@click.option("--portion-quantity", default="0", help="Portion size, 0 if sold loose.")
@click.option("--min-quantity", default="0", help="Minimum quantity per booking.")
@click.option("--max-quantity", default="0", help="Suggested maximum per booking.")
@click.option("--multiple", default="0", help="Booking increment.")
@click.option("--transport", default=None, help="Transport surcharge.")
@click.option("--variable", is_flag=True, default=False, help="Price may change at delivery.")
@click.option("--variant", "variants", multiple=True, help="Variant as 'Name:value,value'.")
def product_add(supplier_id: str, supplier_name: str | None, **options) -> None:
    """Add a new product to a supplier's catalog."""
    spec = ProductSpec(
        name=options["name"],
        supplier=Supplier(id=supplier_id, name=supplier_name or supplier_id),
        price=options["price"],
        discount=options["discount"],
        measure=_reference(Measure, options["measure"]),
        category=_reference(Category, options["category"]),
        max_available=options["max_available"],
        portion_quantity=options["portion_quantity"],
        min_quantity=options["min_quantity"],
        max_quantity=options["max_quantity"],
        multiple=options["multiple"],
        transport=options["transport"],
        variable=options["variable"],
        variants=_parse_variants(options["variants"]),
    )
    handler = AddProductHandler(product_repo=product_repository())
    try:
        product = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.id}' added at {product.price}")


@click.command("list")
@click.option("--supplier", "supplier_id", default=None, help="Only this supplier's products.")
def product_list(supplier_id: str | None) -> None:
    """List products in the catalog."""
    products = ListProductsHandler(product_repo=product_repository()).handle(supplier_id)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<30} {'Name':<20} {'Price':>10} {'Discounted':>12}")
    click.echo("-" * 75)
    loc = catalog_locale()
    for p in products:
        click.echo(
            f"{p.id:<30} {p.name:<20} {loc.amount(p.price.amount):>10} "
            f"{loc.amount(p.discount_price):>12}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--order", "order_id", required=True, type=int, help="Order to price the product in.")
def product_show(product_id: str, order_id: int) -> None:
    """Show a product as it appears inside an order."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        order_repo=order_repository(),
        booking_repo=booking_repository(),
        locale=catalog_locale(),
    )
    try:
        dto = handler.handle(product_id, order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.name}  ({dto.product_id}, order #{dto.order_id})")
    click.echo(f"Price:    {dto.price_text}")
    if dto.measure_text:
        click.echo(f"Measure:  {dto.measure_text}")
    click.echo(f"Portion:  {dto.portion_price}")
    if dto.details_text:
        click.echo(f"Details:  {dto.details_text}")
    if dto.booked_by:
        click.echo(f"Booked by: {', '.join(dto.booked_by)}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name (the ID does not change).")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--discount", default=None, help="New discount percentage.")
@click.option("--max-available", default=None, help="New bookable cap.")
@click.option("--portion-quantity", default=None, help="New portion size.")
@click.option("--transport", default=None, help="New transport surcharge.")
def product_update(product_id: str, **options: str | None) -> None:
    """Update a product's catalog attributes."""
    changes = {name: value for name, value in options.items() if value is not None}
    if not changes:
        raise click.ClickException("Nothing to update")

    handler = UpdateProductHandler(product_repo=product_repository())
    try:
        handler.handle(product_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product_id}' updated: {', '.join(sorted(changes))}")
