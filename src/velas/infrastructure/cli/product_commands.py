"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from velas.application.add_product import AddProductHandler
from velas.application.list_low_stock import ListLowStockHandler
from velas.application.update_product import UpdateProductHandler
from velas.domain.exceptions import DomainException
from velas.domain.model.product import MANUAL_ADJUSTMENT_REASON
from velas.infrastructure.bootstrap import (
    category_price_repository,
    product_repository,
    settings_repository,
)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", default=None, help="Price (defaults to the category price).")
@click.option("--category", default=None, help="Category name.")
@click.option("--quantity", default=0, type=int, help="Units in stock.")
def product_add(name: str, price: str | None, category: str | None, quantity: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_price_repo=category_price_repository(),
    )

    try:
        product = handler.handle(name=name, price=price, category=category, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<18} {'Stock':>6} {'Price':>12}")
    click.echo("-" * 70)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.category or '-':<18} {p.quantity:>6} {str(p.price):>12}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.90).")
@click.option("--reason", default=MANUAL_ADJUSTMENT_REASON, help="Reason kept in the price history.")
def product_update(product_id: str, price: str, reason: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        changed = handler.handle(product_id=product_id, new_price=price, reason=reason)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if changed:
        click.echo(f"Product #{product_id} price updated to R$ {price}")
    else:
        click.echo(f"Product #{product_id} already costs R$ {price}")


@click.command("low-stock")
def product_low_stock() -> None:
    """List products below the low stock threshold."""
    handler = ListLowStockHandler(
        product_repo=product_repository(),
        settings_repo=settings_repository(),
    )
    lines = handler.handle()

    if not lines:
        click.echo("No products below the low stock threshold.")
        return

    click.echo(f"{'Product':<24} {'Category':<18} {'Stock':>6} {'Threshold':>10}")
    click.echo("-" * 61)
    for line in lines:
        click.echo(
            f"{line.product_name:<24} {line.category or '-':<18} {line.quantity:>6} {line.threshold:>10}"
        )
