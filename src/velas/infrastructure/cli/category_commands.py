"""CLI commands for category prices."""

from __future__ import annotations

import click

from velas.application.apply_category_price import ApplyCategoryPriceHandler
from velas.application.create_category_price import CreateCategoryPriceHandler
from velas.application.delete_category_price import DeleteCategoryPriceHandler
from velas.application.list_category_prices import ListCategoryPricesHandler
from velas.application.update_category_price import UpdateCategoryPriceHandler
from velas.domain.exceptions import DomainException
from velas.infrastructure.bootstrap import catalog_unit_of_work

PREVIEW_LIMIT = 5


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--price", required=True, help="Standard price (e.g. 32.90).")
def category_add(name: str, price: str) -> None:
    """Define the standard price of a category."""
    handler = CreateCategoryPriceHandler(catalog_unit_of_work())

    try:
        record = handler.handle(category_name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{record.id} '{record.category_name}' priced at {record.price}")


@click.command("list")
def category_list() -> None:
    """List category prices."""
    records = ListCategoryPricesHandler(catalog_unit_of_work()).handle()

    if not records:
        click.echo("No category prices found.")
        return

    click.echo(f"{'ID':<6} {'Category':<24} {'Price':>12} {'Updated':>22}")
    click.echo("-" * 67)
    for r in records:
        click.echo(f"{r.id:<6} {r.category_name:<24} {r.price:>12} {r.updated_at:>22}")


@click.command("show")
@click.option("--name", required=True, help="Category name (case-insensitive).")
def category_show(name: str) -> None:
    """Show the standard price recorded for a category."""
    handler = ListCategoryPricesHandler(catalog_unit_of_work())

    try:
        record = handler.find_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{record.id} '{record.category_name}'")
    click.echo(f"Price:   {record.price}")
    click.echo(f"Updated: {record.updated_at}")


@click.command("update")
@click.option("--id", "category_price_id", required=True, help="Category price ID.")
@click.option("--name", required=True, help="Category name (may be a new name).")
@click.option("--price", required=True, help="New standard price.")
@click.option("--yes", is_flag=True, default=False, help="Do not ask for confirmation.")
def category_update(category_price_id: str, name: str, price: str, yes: bool) -> None:
    """Update a category price and reprice its products."""
    handler = UpdateCategoryPriceHandler(catalog_unit_of_work())

    try:
        preview = handler.preview(category_price_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if preview.count and not yes:
        click.echo(
            f"This will set {preview.count} product(s) of category "
            f"'{preview.category_name}' to R$ {price}:"
        )
        for product_name in preview.product_names[:PREVIEW_LIMIT]:
            click.echo(f"  - {product_name}")
        if preview.count > PREVIEW_LIMIT:
            click.echo(f"  ... and {preview.count - PREVIEW_LIMIT} more")
        click.echo("Sales already recorded will NOT change.")
        click.confirm("Continue?", abort=True)

    try:
        updated = handler.handle(category_price_id, category_name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_price_id} updated — {updated} product(s) repriced.")


@click.command("delete")
@click.option("--id", "category_price_id", required=True, help="Category price ID.")
def category_delete(category_price_id: str) -> None:
    """Delete a category price (product prices are kept)."""
    handler = DeleteCategoryPriceHandler(catalog_unit_of_work())

    try:
        handler.handle(category_price_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_price_id} deleted.")


@click.command("apply")
@click.option("--name", required=True, help="Category name.")
@click.option("--price", default=None, help="Price to apply (defaults to the recorded one).")
def category_apply(name: str, price: str | None) -> None:
    """Apply a price to every product of a category."""
    handler = ApplyCategoryPriceHandler(catalog_unit_of_work())

    try:
        updated = handler.handle(category_name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{updated} product(s) of '{name}' repriced.")
