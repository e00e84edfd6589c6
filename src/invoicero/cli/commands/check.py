"""Identifier validation command."""

import click

from invoicero.cli.error_handling import handle_domain_error
from invoicero.domain.errors import ParseError
from invoicero.domain.identifiers import Currency, Iban, InvoiceNumber, RegistrationNumber


@click.command("check")
@click.argument("kind", type=click.Choice(["ico", "iban", "currency", "number"]))
@click.argument("value")
@click.pass_context
def check_identifier(ctx, kind: str, value: str):
    """Validate an identifier and print its canonical form.

    KIND is one of: ico, iban, currency, number.

    Examples:
        invoicero check ico 679313
        invoicero check iban "CZ65 0800 0000 1920 0014 5399"
        invoicero check number 202403
    """
    try:
        if kind == "ico":
            click.echo(f"Valid registration number: {RegistrationNumber.parse(value)}")
        elif kind == "iban":
            iban = Iban.parse(value)
            click.echo(f"Valid IBAN: {iban.formatted}")
            if iban.country_code in ("CZ", "SK"):
                click.echo(f"  Account: {iban.to_bank_account_number()}")
        elif kind == "currency":
            currency = Currency.parse(value)
            click.echo(f"Supported currency: {currency.code} ({currency.symbol})")
        else:
            click.echo(f"Valid invoice number: {InvoiceNumber.parse(value)}")
    except ParseError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register check command with main CLI."""
    cli.add_command(check_identifier)
