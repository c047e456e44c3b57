import click

from fulfillment.infrastructure.cli.order_commands import order_create, order_process
from fulfillment.infrastructure.cli.product_commands import product_add, product_list
from fulfillment.infrastructure.config import get_settings
from fulfillment.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Order fulfillment against the product catalog."""
    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, json=settings.LOG_JSON)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_process)
product.add_command(product_add)
product.add_command(product_list)
