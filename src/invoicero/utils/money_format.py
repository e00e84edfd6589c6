"""Money formatting per currency."""

from decimal import Decimal
from typing import NamedTuple

from invoicero.domain.identifiers import Currency
from invoicero.domain.money import quantize


class MoneyStyle(NamedTuple):
    """How amounts in one currency are written."""

    pattern: str
    decimal_separator: str
    thousands_separator: str


MONEY_STYLES = {
    Currency.CZK: MoneyStyle("{v} {s}", ",", " "),
    Currency.EUR: MoneyStyle("{s}{v}", ",", "."),
    Currency.USD: MoneyStyle("{s}{v}", ".", ","),
}


def format_money(amount: Decimal, currency: Currency) -> str:
    """Format an amount for display.

    Examples:
        >>> format_money(Decimal("1250"), Currency.CZK)
        '1 250,00 Kč'
        >>> format_money(Decimal("-1250.5"), Currency.EUR)
        '-€1.250,50'
    """
    style = MONEY_STYLES[currency]
    rounded = quantize(amount, currency.exponent)

    integral, _, fraction = f"{abs(rounded):,.{currency.exponent}f}".partition(".")
    integral = integral.replace(",", style.thousands_separator)
    value = integral + (style.decimal_separator + fraction if fraction else "")

    text = style.pattern.format(v=value, s=currency.symbol)
    if rounded < 0:
        text = "-" + text
    return text
