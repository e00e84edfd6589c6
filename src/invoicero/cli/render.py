"""Plain-text invoice layout for the terminal."""

from invoicero.domain.entity import Entity, EntityRole
from invoicero.domain.invoice import Invoice
from invoicero.domain.payment import BankTransfer
from invoicero.utils.date_parser import format_date
from invoicero.utils.money_format import format_money

WIDTH = 72


def _pair(label: str, value: str, width: int = WIDTH) -> str:
    return f"{label} {value:>{width - len(label) - 1}}"


def render_entity(entity: Entity, role: EntityRole) -> list[str]:
    """Lines describing a contractor or client."""
    lines = [
        str(role),
        entity.name,
        entity.address.first_line,
        entity.address.second_line,
    ]
    if entity.registration_number is not None:
        lines.append(_pair("IČO", str(entity.registration_number), 40))
    if entity.vat_number:
        lines.append(_pair("DIČ", entity.vat_number, 40))
    else:
        lines.append("Neplátce DPH")
    return lines


def render_invoice(invoice: Invoice) -> str:
    """Lay out an invoice as text.

    The layout follows the printed invoice: heading, both parties, payment
    details, dates, items and the amount due.
    """
    currency = invoice.currency
    lines = [f"Faktura {invoice.number}", "=" * WIDTH, ""]

    lines.extend(render_entity(invoice.contractor, EntityRole.CONTRACTOR))
    lines.append("")
    lines.extend(render_entity(invoice.client, EntityRole.CLIENT))
    lines.append("")

    if isinstance(invoice.payment_method, BankTransfer):
        lines.append(_pair("Bankovní účet", invoice.iban.to_bank_account_number()))
        lines.append(_pair("IBAN", invoice.iban.formatted))
        lines.append(_pair("Variabilní symbol", invoice.payment_reference()))
    lines.append(_pair("Způsob platby", str(invoice.payment_method)))
    lines.append(_pair("Datum vystavení", format_date(invoice.issue_date)))
    lines.append(_pair("Datum splatnosti", format_date(invoice.due_date)))
    lines.append("")

    lines.append(f"{'MNOŽSTVÍ':<14}{'POPIS':<28}{'CENA ZA MJ':>15}{'CELKEM':>15}")
    lines.append("-" * WIDTH)
    for item in invoice.items:
        quantity = str(item.item_type)
        description = item.description if len(item.description) <= 27 else item.description[:24] + "..."
        lines.append(
            f"{quantity:<14}{description:<28}"
            f"{format_money(item.unit_price, currency):>15}"
            f"{format_money(item.subtotal(), currency):>15}"
        )
    lines.append("-" * WIDTH)
    lines.append(_pair("Celkem k úhradě", format_money(invoice.amount_due(), currency)))

    if invoice.note:
        lines.append("")
        lines.append(invoice.note)

    return "\n".join(lines)
