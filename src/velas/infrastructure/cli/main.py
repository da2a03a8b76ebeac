from __future__ import annotations

from pathlib import Path

import click

from velas.infrastructure.bootstrap import DATA_DIR_ENV, use_data_dir
from velas.infrastructure.cli.category_commands import (
    category_add,
    category_apply,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from velas.infrastructure.cli.customer_commands import (
    customer_add,
    customer_credits,
    customer_list,
)
from velas.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_low_stock,
    product_update,
)
from velas.infrastructure.cli.sale_commands import (
    sale_cancel,
    sale_create,
    sale_list,
    sale_quote,
    sale_show,
    sale_status,
)
from velas.infrastructure.cli.settings_commands import (
    settings_reset,
    settings_show,
    settings_update,
)
from velas.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
def cli(data_dir: Path | None, verbose: bool) -> None:
    """Velas — pricing and jar credits for a candle shop"""
    configure_logging(verbose)
    use_data_dir(data_dir)


@cli.group()
def settings() -> None:
    """Manage store settings."""


@cli.group()
def category() -> None:
    """Manage category prices."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def customer() -> None:
    """Manage customers and jar credits."""


@cli.group()
def sale() -> None:
    """Quote and manage sales."""


# Register subcommands
settings.add_command(settings_show)
settings.add_command(settings_update)
settings.add_command(settings_reset)
category.add_command(category_add)
category.add_command(category_apply)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_low_stock)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_credits)
customer.add_command(customer_list)
sale.add_command(sale_cancel)
sale.add_command(sale_create)
sale.add_command(sale_list)
sale.add_command(sale_quote)
sale.add_command(sale_show)
sale.add_command(sale_status)
