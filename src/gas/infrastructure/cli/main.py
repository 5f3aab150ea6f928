import click

from gas.infrastructure.cli.booking_commands import booking_add
from gas.infrastructure.cli.order_commands import order_add_product, order_create
from gas.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_show,
    product_update,
)
from gas.infrastructure.config import get_settings
from gas.infrastructure.logging_setup import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output.")
def cli(verbose: bool) -> None:
    """GAS: purchasing group product catalog"""
    configure_logging(get_settings().LOG_LEVEL, verbose=verbose)


@cli.group()
def product() -> None:
    """Manage catalog products."""


@cli.group()
def order() -> None:
    """Manage supplier orders."""


@cli.group()
def booking() -> None:
    """Manage member bookings."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)

order.add_command(order_create)
order.add_command(order_add_product)

booking.add_command(booking_add)
