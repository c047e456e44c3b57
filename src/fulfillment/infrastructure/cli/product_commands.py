"""CLI commands for the Product aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from fulfillment.application.add_product import AddProductHandler
from fulfillment.domain.exceptions import DomainException
from fulfillment.domain.model.product import ProductType
from fulfillment.infrastructure.bootstrap import product_repository

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


def _format_date(value: datetime | None) -> str:
    return value.strftime("%Y-%m-%d") if value is not None else "-"


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option(
    "--type",
    "product_type",
    required=True,
    type=click.Choice([t.value for t in ProductType], case_sensitive=False),
    help="Product type.",
)
@click.option("--available", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--lead-time", default=0, show_default=True, type=int, help="Days to restock.")
@click.option("--expiry", type=_DATE, default=None, help="Expiry date (EXPIRABLE).")
@click.option("--season-start", type=_DATE, default=None, help="Season start (SEASONAL).")
@click.option("--season-end", type=_DATE, default=None, help="Season end (SEASONAL).")
def product_add(
    name: str,
    product_type: str,
    available: int,
    lead_time: int,
    expiry: datetime | None,
    season_start: datetime | None,
    season_end: datetime | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            product_type=product_type,
            available=available,
            lead_time=lead_time,
            expiry_date=expiry,
            season_start=season_start,
            season_end=season_end,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"({product.type.value}, {product.available} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()

    try:
        products = repo.list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Type':<10} {'Avail':>6} {'Lead':>5} "
        f"{'Expiry':>10} {'Season':>23}"
    )
    click.echo("-" * 86)
    for p in products:
        season = (
            f"{_format_date(p.season_start)}..{_format_date(p.season_end)}"
            if p.season_start or p.season_end
            else "-"
        )
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.type.value:<10} {p.available:>6} "
            f"{p.lead_time:>5} {_format_date(p.expiry_date):>10} {season:>23}"
        )
