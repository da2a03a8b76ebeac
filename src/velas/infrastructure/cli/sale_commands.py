"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import click

from velas.application.cancel_sale import CancelSaleHandler
from velas.application.commit_sale import CommitSaleHandler
from velas.application.dto import CartItemSpec, QuoteDTO, SaleDTO
from velas.application.quote_sale import QuoteSaleHandler
from velas.application.show_sale import ShowSaleHandler
from velas.application.update_sale_status import (
    UpdateSaleStatusHandler,
    parse_payment_method,
    parse_status,
)
from velas.domain.exceptions import DomainException
from velas.infrastructure.bootstrap import (
    customer_repository,
    product_repository,
    sale_repository,
    settings_repository,
)

_date_option = click.option(
    "--date",
    "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Price as of this day (YYYY-MM-DD); defaults to today.",
)


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Vela Lavanda:3,Difusor:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _quote(customer_id: str, items: str, discount: str, on_date):
    handler = QuoteSaleHandler(
        product_repo=product_repository(),
        customer_repo=customer_repository(),
        settings_repo=settings_repository(),
    )
    return handler.handle(
        customer_id=customer_id,
        item_specs=_parse_items(items),
        today=on_date.date() if on_date else None,
        additional_discount_percent=discount,
    )


def _display_lines(items) -> None:
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*56}")
    for item in items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>12} {item.total_price:>12}"
        )
    click.echo(f"  {'-'*56}")


def _display_quote(dto: QuoteDTO) -> None:
    click.echo(f"Quote for {dto.customer_name}")
    click.echo()
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>26}")
    if dto.birthday_discount != "R$ 0.00":
        click.echo(f"  {'Birthday (' + dto.birthday_discount_percent + ')':<30} {'-' + dto.birthday_discount:>26}")
    if dto.additional_discount != "R$ 0.00":
        click.echo(f"  {'Additional (' + dto.additional_discount_percent + ')':<30} {'-' + dto.additional_discount:>26}")
    if dto.jar_credits_used:
        click.echo(f"  {'Jars returned (' + str(dto.jar_credits_used) + ')':<30} {'-' + dto.jar_discount:>26}")
    click.echo(f"  {'Total':<30} {dto.total_amount:>26}")
    if dto.clamped:
        click.echo("  Warning: discounts exceed the subtotal; check the discount settings.")


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Sale #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {dto.sale_date}")
    if dto.payment_method:
        click.echo(f"Payment:  {dto.payment_method}")
    click.echo()
    _display_lines(dto.items)
    click.echo(f"  {'Subtotal':<30} {dto.subtotal:>26}")
    click.echo(f"  {'Discount (' + dto.discount_percentage + ')':<30} {'-' + dto.discount_amount:>26}")
    click.echo(f"  {'Total':<30} {dto.total_amount:>26}")
    if dto.notes:
        click.echo()
        click.echo(dto.notes)


@click.command("quote")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--discount", default="0", help="Additional discount % (0-100).")
@_date_option
def sale_quote(customer_id: str, items: str, discount: str, on_date) -> None:
    """Preview a sale's price without recording it."""
    try:
        pricing = _quote(customer_id, items, discount, on_date)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_quote(QuoteDTO.from_pricing(pricing))


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--discount", default="0", help="Additional discount % (0-100).")
@click.option("--status", default="Pending", help="Pending, AwaitingPayment, Paid or Cancelled.")
@click.option("--payment", default=None, help="Cash, Pix, Debit or Credit.")
@click.option("--notes", default="", help="Free-text notes.")
@_date_option
def sale_create(
    customer_id: str,
    items: str,
    discount: str,
    status: str,
    payment: str | None,
    notes: str,
    on_date,
) -> None:
    """Record a sale (redeems jar credits unless cancelled)."""
    handler = CommitSaleHandler(
        sale_repo=sale_repository(),
        customer_repo=customer_repository(),
    )

    try:
        pricing = _quote(customer_id, items, discount, on_date)
        dto = handler.handle(
            pricing,
            status=parse_status(status),
            payment_method=parse_payment_method(payment),
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{dto.id} created  (status={dto.status})")
    if dto.jar_credits_used:
        click.echo(f"{dto.jar_credits_used} jar credit(s) redeemed.")
    click.echo()
    _display_sale(dto)


@click.command("show")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to display.")
def sale_show(sale_id: int) -> None:
    """Show details of an existing sale."""
    handler = ShowSaleHandler(sale_repo=sale_repository())

    try:
        dto = handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.option("--status", default=None, help="Only sales with this status.")
def sale_list(status: str | None) -> None:
    """List sales."""
    handler = ShowSaleHandler(sale_repo=sale_repository())

    try:
        sales = handler.list(parse_status(status) if status else None)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not sales:
        click.echo("No sales found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<24} {'Status':<16} {'Total':>12}")
    click.echo("-" * 61)
    for s in sales:
        click.echo(f"{s.id:<6} {s.customer_name:<24} {s.status:<16} {s.total_amount:>12}")


@click.command("status")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID.")
@click.option("--to", "new_status", required=True, help="Pending, AwaitingPayment, Paid or Cancelled.")
@click.option("--payment", default=None, help="Payment method (required for Paid).")
def sale_status(sale_id: int, new_status: str, payment: str | None) -> None:
    """Change a sale's status."""
    handler = UpdateSaleStatusHandler(
        sale_repo=sale_repository(),
        customer_repo=customer_repository(),
    )

    try:
        handler.handle(sale_id, status=new_status, payment_method=payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{sale_id} is now {new_status}.")


@click.command("cancel")
@click.option("--id", "sale_id", required=True, type=int, help="Sale ID to cancel.")
def sale_cancel(sale_id: int) -> None:
    """Cancel a sale (refunds redeemed jar credits)."""
    handler = CancelSaleHandler(
        sale_repo=sale_repository(),
        customer_repo=customer_repository(),
    )

    try:
        refunded = handler.handle(sale_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{sale_id} cancelled — {refunded} jar credit(s) refunded.")
