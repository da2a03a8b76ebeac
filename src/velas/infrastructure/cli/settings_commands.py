"""CLI commands for store settings."""

from __future__ import annotations

import click

from velas.application.get_settings import GetSettingsHandler
from velas.application.reset_settings import ResetSettingsHandler
from velas.application.update_settings import UpdateSettingsHandler
from velas.domain.exceptions import DomainException
from velas.domain.model.settings import Settings
from velas.infrastructure.bootstrap import settings_repository


def _display_settings(settings: Settings) -> None:
    click.echo(f"Company:             {settings.company_name}")
    click.echo(f"Phone:               {settings.company_phone or '-'}")
    click.echo(f"Email:               {settings.company_email or '-'}")
    click.echo(f"Address:             {settings.company_address or '-'}")
    click.echo(f"Low stock threshold: {settings.low_stock_threshold}")
    click.echo(f"Birthday discount:   {settings.birthday_discount_percent}%")
    click.echo(f"Jar discount:        {settings.jar_discount_amount} per jar")


@click.command("show")
def settings_show() -> None:
    """Show current settings."""
    _display_settings(GetSettingsHandler(settings_repository()).handle())


@click.command("update")
@click.option("--low-stock-threshold", type=int, default=None, help="Low stock alert level.")
@click.option("--company-name", default=None, help="Company name.")
@click.option("--company-phone", default=None, help="Company phone.")
@click.option("--company-email", default=None, help="Company e-mail.")
@click.option("--company-address", default=None, help="Company address.")
@click.option("--birthday-discount", default=None, help="Birthday discount % (0-100).")
@click.option("--jar-discount", default=None, help="Discount per returned jar (e.g. 5.00).")
def settings_update(
    low_stock_threshold: int | None,
    company_name: str | None,
    company_phone: str | None,
    company_email: str | None,
    company_address: str | None,
    birthday_discount: str | None,
    jar_discount: str | None,
) -> None:
    """Update settings; omitted options keep their current value."""
    repo = settings_repository()
    current = GetSettingsHandler(repo).handle()

    def pick(value, fallback):
        return fallback if value is None else value

    try:
        updated = UpdateSettingsHandler(repo).handle(
            low_stock_threshold=pick(low_stock_threshold, current.low_stock_threshold),
            company_name=pick(company_name, current.company_name),
            birthday_discount_percent=pick(
                birthday_discount, current.birthday_discount_percent
            ),
            jar_discount_amount=pick(jar_discount, current.jar_discount_amount.amount),
            company_phone=pick(company_phone, current.company_phone),
            company_email=pick(company_email, current.company_email),
            company_address=pick(company_address, current.company_address),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Settings updated.")
    _display_settings(updated)


@click.command("reset")
@click.confirmation_option(prompt="Reset all settings to their defaults?")
def settings_reset() -> None:
    """Restore default settings."""
    _display_settings(ResetSettingsHandler(settings_repository()).handle())
