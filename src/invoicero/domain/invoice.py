"""Invoice aggregate."""

import dataclasses
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Optional, Sequence

from invoicero.domain.entity import Entity
from invoicero.domain.errors import (
    EmptyInvoiceError,
    InvalidDateRangeError,
    ValidationError,
    empty_invoice,
    invalid_date_range,
)
from invoicero.domain.identifiers import Currency, Iban, InvoiceNumber
from invoicero.domain.items import MINUTES_PER_HOUR, InvoiceItem
from invoicero.domain.payment import BankTransfer, PaymentMethod
from invoicero.domain.spayd import MAX_AMOUNT, build_spayd
from invoicero.domain.money import exact_arithmetic, quantize

logger = logging.getLogger(__name__)


def derive_due_date(issue_date: date, due_days: int) -> date:
    """Return the due date ``due_days`` after the issue date.

    Raises:
        ValidationError: If due_days is negative
    """
    if due_days < 0:
        raise ValidationError(f"Due days must not be negative, got {due_days}")
    return issue_date + timedelta(days=due_days)


@dataclass(frozen=True)
class Invoice:
    """A complete, validated invoice.

    Construction validates every invariant: the number format, a non-empty
    item list and a due date on or after the issue date. Text values for the
    number, IBAN and currency are parsed. An invoice is never modified; use
    ``replace`` to build a changed copy.
    """

    number: InvoiceNumber
    contractor: Entity
    client: Entity
    iban: Iban
    payment_method: PaymentMethod
    items: Sequence[InvoiceItem]
    issue_date: date
    due_date: date
    currency: Currency = Currency.CZK
    note: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.number, str):
            object.__setattr__(self, "number", InvoiceNumber.parse(self.number))
        if isinstance(self.iban, str):
            object.__setattr__(self, "iban", Iban.parse(self.iban))
        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", Currency.parse(self.currency))

        items = tuple(self.items)
        if not items:
            raise EmptyInvoiceError(empty_invoice())
        object.__setattr__(self, "items", items)

        if self.due_date < self.issue_date:
            raise InvalidDateRangeError(invalid_date_range(self.issue_date, self.due_date))

        logger.debug(
            "Built invoice %s with %d item(s), total %s %s",
            self.number,
            len(items),
            self.total(),
            self.currency,
        )

    def total(self) -> Decimal:
        """Sum of item subtotals, independent of item order.

        The scaled subtotals are added exactly and divided once, so the only
        rounding is that single division.
        """
        with exact_arithmetic():
            scaled = sum((item.scaled_subtotal() for item in self.items), Decimal(0))
        return scaled / MINUTES_PER_HOUR

    def amount_due(self) -> Decimal:
        """Total rounded to the currency's minor unit."""
        return quantize(self.total(), self.currency.exponent)

    def payment_reference(self) -> Optional[str]:
        """Variable symbol for a bank transfer, None for other payment methods."""
        if not isinstance(self.payment_method, BankTransfer):
            return None
        return self.payment_method.variable_symbol or self.number.value

    def payment_qr_payload(self) -> Optional[str]:
        """SPAYD payload for the payment QR code.

        None unless the invoice is paid by bank transfer and the amount due is
        one SPAYD can carry (0.01 to 9 999 999.99). Credit notes and larger
        invoices carry no payment QR code.
        """
        reference = self.payment_reference()
        amount = self.amount_due()
        if reference is None or amount <= 0:
            return None
        if amount > MAX_AMOUNT:
            logger.info("No QR payload for invoice %s: %s exceeds the SPAYD limit", self.number, amount)
            return None
        return build_spayd(
            self.iban,
            amount,
            self.currency,
            variable_symbol=reference,
            message=self.note,
        )

    def replace(self, **changes) -> "Invoice":
        """Return a new invoice with the given fields changed, validated again."""
        return dataclasses.replace(self, **changes)
