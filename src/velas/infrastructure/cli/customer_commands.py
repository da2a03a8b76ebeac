"""CLI commands for customers and their jar credits."""

from __future__ import annotations

from datetime import date

import click

from velas.application.add_customer import AddCustomerHandler
from velas.application.adjust_jar_credits import AdjustJarCreditsHandler
from velas.application.list_customers import ListCustomersHandler
from velas.domain.exceptions import DomainException
from velas.infrastructure.bootstrap import customer_repository


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--birth-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help="YYYY-MM-DD.")
@click.option("--email", default="", help="E-mail.")
@click.option("--phone", default="", help="Phone.")
@click.option("--jars", default=0, type=int, help="Initial jar credits.")
def customer_add(name: str, birth_date, email: str, phone: str, jars: int) -> None:
    """Register a customer."""
    handler = AddCustomerHandler(customer_repo=customer_repository())

    try:
        customer = handler.handle(
            name=name,
            birth_date=birth_date.date() if birth_date else None,
            email=email,
            phone=phone,
            initial_jar_credits=jars,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added ({customer.jar_credits} jar credit(s))")


@click.command("list")
@click.option("--birthdays", is_flag=True, default=False, help="Only customers born this month.")
@click.option("--with-credits", is_flag=True, default=False, help="Only customers with jar credits.")
def customer_list(birthdays: bool, with_credits: bool) -> None:
    """List customers."""
    handler = ListCustomersHandler(customer_repo=customer_repository())
    if birthdays:
        customers = handler.birthday_month(date.today())
    elif with_credits:
        customers = handler.with_jar_credits()
    else:
        customers = handler.handle()

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Birth date':<12} {'Jars':>6}")
    click.echo("-" * 51)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<24} {c.birth_date or '-':<12} {c.jar_credits:>6}")


@click.command("credits")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--add", "delta", type=int, default=None, help="Jars to add (negative to remove).")
@click.option("--set", "balance", type=int, default=None, help="New jar credit balance.")
def customer_credits(customer_id: str, delta: int | None, balance: int | None) -> None:
    """Show or change a customer's jar credits."""
    if delta is not None and balance is not None:
        raise click.ClickException("Use either --add or --set, not both")

    handler = AdjustJarCreditsHandler(customer_repo=customer_repository())

    try:
        if delta is not None:
            credits = handler.handle(customer_id, delta)
        elif balance is not None:
            credits = handler.set_balance(customer_id, balance)
        else:
            credits = handler.handle(customer_id, 0)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} has {credits} jar credit(s).")
