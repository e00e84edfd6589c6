"""Create invoice command."""

import logging

import click

from invoicero.cli.error_handling import handle_domain_error, resolve_entity_or_exit
from invoicero.cli.item_parser import parse_item_spec
from invoicero.cli.render import render_invoice
from invoicero.domain.errors import DomainError
from invoicero.domain.identifiers import Currency, Iban, InvoiceNumber
from invoicero.domain.invoice import Invoice, derive_due_date
from invoicero.domain.payment import BankTransfer, Card, Cash
from invoicero.utils.date_parser import parse_date

logger = logging.getLogger(__name__)


@click.command("create")
@click.option("--number", required=True, help="Invoice number (YYYYNN, e.g. 202403)")
@click.option(
    "--contractor",
    required=True,
    envvar="INVOICERO_CONTRACTOR",
    help="Contractor registration number (IČO)",
)
@click.option("--client", required=True, help="Client registration number (IČO)")
@click.option("--iban", required=True, envvar="INVOICERO_IBAN", help="IBAN to be paid to")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="Invoice item as QUANTITY;UNIT_PRICE;DESCRIPTION (e.g. '1:30h;350;Programming')",
)
@click.option(
    "--date",
    "issue_date",
    default="today",
    show_default=True,
    help="Issue date (YYYY-MM-DD, DD. MM. YYYY or relative like 'today')",
)
@click.option(
    "--due-days",
    type=click.IntRange(min=0),
    default=14,
    show_default=True,
    envvar="INVOICERO_DUE_DAYS",
    help="Days between issue date and due date",
)
@click.option("--due-date", help="Explicit due date (overrides --due-days)")
@click.option(
    "--currency",
    default="CZK",
    show_default=True,
    envvar="INVOICERO_CURRENCY",
    help="Invoice currency (CZK, EUR, USD)",
)
@click.option(
    "--payment",
    type=click.Choice(["bank", "cash", "card"]),
    default="bank",
    show_default=True,
    help="Payment method",
)
@click.option("--variable-symbol", help="Variable symbol (defaults to the invoice number)")
@click.option("--card-number", help="Card number shown for card payments")
@click.option("--note", help="Note printed at the bottom of the invoice")
@click.pass_context
def create_invoice(
    ctx,
    number: str,
    contractor: str,
    client: str,
    iban: str,
    items: tuple[str, ...],
    issue_date: str,
    due_days: int,
    due_date: str | None,
    currency: str,
    payment: str,
    variable_symbol: str | None,
    card_number: str | None,
    note: str | None,
):
    """Create an invoice and print it with its payment QR payload.

    Both parties are looked up in the business registry.

    Examples:
        invoicero create --number 202403 --contractor 27082440 --client 29210372 \\
            --iban CZ6508000000192000145399 --item "1:30h;350;Programming"
        invoicero create --number 202404 --client 29210372 --item "3;150;Licences" \\
            --item "paušál;5000;Support" --due-days 30
    """
    resolver = ctx.obj["resolver"]

    # Parse identifiers before touching the registry
    try:
        invoice_number = InvoiceNumber.parse(number)
        invoice_iban = Iban.parse(iban)
        invoice_currency = Currency.parse(currency)
    except DomainError as e:
        handle_domain_error(ctx, e)

    # Parse dates
    try:
        issued = parse_date(issue_date)
    except ValueError as e:
        click.echo(f"Error: Invalid issue date: {e}", err=True)
        ctx.exit(1)

    if due_date:
        try:
            due = parse_date(due_date)
        except ValueError as e:
            click.echo(f"Error: Invalid due date: {e}", err=True)
            ctx.exit(1)
    else:
        due = derive_due_date(issued, due_days)

    # Parse items
    try:
        invoice_items = [parse_item_spec(spec) for spec in items]
    except ValueError as e:
        handle_domain_error(ctx, e)

    if payment == "cash":
        payment_method = Cash()
    elif payment == "card":
        if not card_number:
            click.echo("Error: --card-number is required for card payments", err=True)
            ctx.exit(1)
        payment_method = Card(card_number)
    else:
        try:
            payment_method = BankTransfer(variable_symbol)
        except DomainError as e:
            handle_domain_error(ctx, e)

    contractor_entity = resolve_entity_or_exit(ctx, resolver, contractor)
    client_entity = resolve_entity_or_exit(ctx, resolver, client)

    try:
        invoice = Invoice(
            number=invoice_number,
            contractor=contractor_entity,
            client=client_entity,
            iban=invoice_iban,
            payment_method=payment_method,
            items=invoice_items,
            issue_date=issued,
            due_date=due,
            currency=invoice_currency,
            note=note,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    logger.info("Created invoice %s for %s", invoice.number, invoice.client.name)

    click.echo(render_invoice(invoice))

    try:
        payload = invoice.payment_qr_payload()
    except DomainError as e:
        handle_domain_error(ctx, e)
    if payload is not None:
        click.echo("")
        click.echo(f"QR payment: {payload}")


def register_commands(cli):
    """Register create command with main CLI."""
    cli.add_command(create_invoice)
