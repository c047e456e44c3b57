"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from fulfillment.application.create_order import CreateOrderHandler
from fulfillment.application.process_order import ProcessOrderHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.infrastructure.bootstrap import (
    fulfillment_service,
    order_repository,
    product_repository,
)


def _parse_products(raw: str) -> list[str]:
    """Parse 'Widget,Gadget' into a list of product names."""
    names = [name.strip() for name in raw.split(",")]
    if any(not name for name in names):
        raise click.BadParameter(
            f"Invalid product list '{raw}'. Expected 'Product,Product'."
        )
    return names


@click.command("create")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--products", required=True, help="Products as 'Product,Product'.")
def order_create(customer: str, products: str) -> None:
    """Create a new order."""
    names = _parse_products(products)

    handler = CreateOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(customer_name=customer, product_names=names)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    click.echo(f"Customer: {dto.customer_name}")
    for name in dto.product_names:
        click.echo(f"  - {name}")


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Process an order against current stock."""
    product_repo = product_repository()
    handler = ProcessOrderHandler(
        order_repo=order_repository(),
        product_repo=product_repo,
        fulfillment=fulfillment_service(product_repo),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.order_id} processed")
    if not dto.lines:
        click.echo("  (no products)")
        return

    click.echo(f"  {'Product':<20} {'Result':<10} {'Decremented':<11}")
    click.echo(f"  {'-'*43}")
    for line in dto.lines:
        outcome = "ok" if line.success else "failed"
        decremented = "yes" if line.available_decremented else "no"
        click.echo(f"  {line.product_name:<20} {outcome:<10} {decremented:<11}")
