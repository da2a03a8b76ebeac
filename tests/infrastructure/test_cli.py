"""End-to-end CLI runs against a temporary data directory."""

import pytest
from click.testing import CliRunner

from velas.infrastructure.bootstrap import use_data_dir
from velas.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def invoke(*args, input=None):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args], input=input)

    yield invoke
    use_data_dir(None)


@pytest.fixture
def shop(run):
    """A configured shop with one category, two products and two customers."""
    assert run("settings", "update", "--birthday-discount", "10", "--jar-discount", "5").exit_code == 0
    assert run("category", "add", "--name", "Vela", "--price", "30").exit_code == 0
    assert run("product", "add", "--name", "Vela Lavanda", "--category", "Vela", "--quantity", "3").exit_code == 0
    assert run("product", "add", "--name", "Difusor", "--price", "45", "--quantity", "20").exit_code == 0
    assert run("customer", "add", "--name", "Ana", "--birth-date", "1990-10-05", "--jars", "1").exit_code == 0
    assert run("customer", "add", "--name", "Bruno", "--jars", "8").exit_code == 0
    return run


def test_settings_show_creates_defaults(run):
    result = run("settings", "show")
    assert result.exit_code == 0
    assert "Velas Aromáticas" in result.output
    assert "Low stock threshold: 10" in result.output


def test_settings_update_rejects_bad_percentage(run):
    result = run("settings", "update", "--birthday-discount", "150")
    assert result.exit_code != 0
    assert "between 0 and 100" in result.output


def test_settings_reset_asks_for_confirmation(run):
    run("settings", "update", "--company-name", "Outra Loja")
    assert run("settings", "reset", input="n\n").exit_code != 0
    assert "Outra Loja" in run("settings", "show").output

    assert run("settings", "reset", "--yes").exit_code == 0
    assert "Velas Aromáticas" in run("settings", "show").output


def test_product_takes_category_price(shop):
    result = shop("product", "list")
    assert "Vela Lavanda" in result.output
    assert "R$ 30.00" in result.output


def test_quote_writes_nothing(shop):
    result = shop("sale", "quote", "--customer", "2", "--items", "Vela Lavanda:2", "--date", "2026-10-18")
    assert result.exit_code == 0
    assert "Jars returned (2)" in result.output
    assert "R$ 50.00" in result.output

    assert "8 jar credit(s)" in shop("customer", "credits", "--id", "2").output
    assert "No sales found." in shop("sale", "list").output


def test_sale_create_and_cancel_moves_credits(shop):
    created = shop("sale", "create", "--customer", "2", "--items", "Vela Lavanda:2,Difusor:1", "--date", "2026-10-18")
    assert created.exit_code == 0
    assert "Sale #1 created" in created.output
    assert "3 jar credit(s) redeemed." in created.output
    assert "5 jar credit(s)" in shop("customer", "credits", "--id", "2").output

    cancelled = shop("sale", "cancel", "--id", "1")
    assert "3 jar credit(s) refunded" in cancelled.output
    assert "8 jar credit(s)" in shop("customer", "credits", "--id", "2").output

    again = shop("sale", "cancel", "--id", "1")
    assert again.exit_code != 0
    assert "already cancelled" in again.output


def test_birthday_sale_notes(shop):
    created = shop("sale", "create", "--customer", "1", "--items", "Difusor:1", "--date", "2026-10-18")
    assert "[Discounts: Birthday 10% + 1 jar returned: -R$ 5.00]" in created.output
    assert "R$ 35.50" in created.output


def test_sale_status_paid_needs_payment(shop):
    shop("sale", "create", "--customer", "2", "--items", "Difusor:1")
    result = shop("sale", "status", "--id", "1", "--to", "Paid")
    assert result.exit_code != 0
    assert "payment method" in result.output

    assert shop("sale", "status", "--id", "1", "--to", "Paid", "--payment", "Pix").exit_code == 0
    assert "Payment:  Pix" in shop("sale", "show", "--id", "1").output


def test_bad_items_format(shop):
    result = shop("sale", "quote", "--customer", "2", "--items", "Difusor")
    assert result.exit_code != 0
    assert "ProductName:Quantity" in result.output


def test_category_update_previews_and_propagates(shop):
    aborted = shop("category", "update", "--id", "1", "--name", "Vela", "--price", "32.90", input="n\n")
    assert aborted.exit_code != 0
    assert "Vela Lavanda" in aborted.output
    assert "R$ 30.00" in shop("product", "list").output

    done = shop("category", "update", "--id", "1", "--name", "Vela", "--price", "32.90", "--yes")
    assert done.exit_code == 0
    assert "1 product(s) repriced" in done.output
    assert "R$ 32.90" in shop("product", "list").output


def test_category_duplicate_name(shop):
    result = shop("category", "add", "--name", " vela ", "--price", "10")
    assert result.exit_code != 0
    assert "already exists" in result.output


def test_low_stock_report(shop):
    result = shop("product", "low-stock")
    assert "Vela Lavanda" in result.output
    assert "Difusor" not in result.output


def test_customer_credits_rejects_negative_balance(shop):
    result = shop("customer", "credits", "--id", "1", "--add", "-5")
    assert result.exit_code != 0
    assert "1 jar credit(s)" in shop("customer", "credits", "--id", "1").output


def test_category_show(shop):
    result = shop("category", "show", "--name", "VELA")
    assert result.exit_code == 0
    assert "Category #1 'Vela'" in result.output
    assert "R$ 30.00" in result.output

    missing = shop("category", "show", "--name", "Sabonete")
    assert missing.exit_code != 0
    assert "No price recorded" in missing.output
