"""Short Payment Descriptor (SPAYD) payloads for Czech payment QR codes.

The payload is plain text such as::

    SPD*1.0*ACC:CZ6508000000192000145399*AM:1250.00*CC:CZK*X-VS:202403

Encoding it into a QR image is left to the caller.
"""

from decimal import Decimal
from typing import Optional

from invoicero.domain.errors import ValidationError
from invoicero.domain.identifiers import Currency, Iban
from invoicero.domain.payment import parse_variable_symbol
from invoicero.domain.money import quantize

SPAYD_HEADER = "SPD"
SPAYD_VERSION = "1.0"
MAX_AMOUNT = Decimal("9999999.99")
MAX_MESSAGE_LENGTH = 60


def _escape(value: str) -> str:
    return value.replace("*", "%2A")


def _message_field(text: str) -> str:
    """Escape a payee message and cut it to MAX_MESSAGE_LENGTH.

    The limit applies to the escaped text and never splits an escape sequence.
    """
    escaped = _escape(text.strip())
    if len(escaped) <= MAX_MESSAGE_LENGTH:
        return escaped
    escaped = escaped[:MAX_MESSAGE_LENGTH]
    for partial in ("%2", "%"):
        if escaped.endswith(partial):
            return escaped[: -len(partial)]
    return escaped


def build_spayd(
    iban: Iban,
    amount: Decimal,
    currency: Currency,
    variable_symbol: Optional[str] = None,
    message: Optional[str] = None,
) -> str:
    """Build a SPAYD 1.0 payload.

    Args:
        iban: Account to pay to
        amount: Amount to pay, rounded to two decimals
        currency: Payment currency
        variable_symbol: Optional variable symbol (1-10 digits)
        message: Optional message for the payee, cut to 60 characters

    Returns:
        SPAYD text with keys in alphabetical order

    Raises:
        ValidationError: If the amount is not positive or too large
        InvalidVariableSymbolError: If the variable symbol is not 1-10 digits
    """
    amount = quantize(amount, currency.exponent)
    if amount <= 0 or amount > MAX_AMOUNT:
        raise ValidationError(f"Payment amount must be between 0.01 and {MAX_AMOUNT}, got {amount}")

    # Only MSG can contain "*"; it is escaped when added
    fields = {
        "ACC": str(iban),
        "AM": f"{amount:.2f}",
        "CC": currency.code,
    }
    if message and message.strip():
        fields["MSG"] = _message_field(message)
    if variable_symbol is not None:
        fields["X-VS"] = parse_variable_symbol(variable_symbol)

    parts = [SPAYD_HEADER, SPAYD_VERSION]
    parts.extend(f"{key}:{value}" for key, value in sorted(fields.items()))
    return "*".join(parts)
