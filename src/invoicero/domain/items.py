"""Invoice line items."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from invoicero.domain.errors import ValidationError
from invoicero.domain.money import exact_arithmetic, to_decimal

MINUTES_PER_HOUR = 60


@dataclass(frozen=True)
class Hours:
    """Time spent, billed per hour."""

    hours: int
    minutes: int = 0

    def __post_init__(self):
        if isinstance(self.hours, bool) or not isinstance(self.hours, int) or self.hours < 0:
            raise ValidationError(f"Hours must be a non-negative integer, got {self.hours!r}")
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int) or not 0 <= self.minutes < MINUTES_PER_HOUR:
            raise ValidationError(f"Minutes must be an integer between 0 and 59, got {self.minutes!r}")

    @property
    def total_minutes(self) -> int:
        return self.hours * MINUTES_PER_HOUR + self.minutes

    def factor(self) -> Decimal:
        """Hours as a decimal number, e.g. 1:30 is 1.5."""
        return Decimal(self.total_minutes) / MINUTES_PER_HOUR

    def __str__(self) -> str:
        if self.minutes:
            return f"{self.hours} hod {self.minutes} min"
        return f"{self.hours} hod"


@dataclass(frozen=True)
class Quantity:
    """Number of units, e.g. pieces."""

    count: Decimal

    def __post_init__(self):
        object.__setattr__(self, "count", to_decimal(self.count, field="count"))

    def factor(self) -> Decimal:
        return self.count

    def __str__(self) -> str:
        return f"{self.count} ks"


@dataclass(frozen=True)
class Other:
    """Fixed-price line described by a free-form label."""

    label: str

    def factor(self) -> Decimal:
        return Decimal(1)

    def __str__(self) -> str:
        return self.label


InvoiceItemType = Union[Hours, Quantity, Other]


@dataclass(frozen=True)
class InvoiceItem:
    """A single billable line of an invoice.

    Unit prices may be negative for credit or correction lines.
    """

    item_type: InvoiceItemType
    description: str
    unit_price: Decimal

    def __post_init__(self):
        if not isinstance(self.item_type, (Hours, Quantity, Other)):
            raise ValidationError(f"Unknown item type: {self.item_type!r}")
        object.__setattr__(self, "unit_price", to_decimal(self.unit_price, field="unit price"))

    def scaled_subtotal(self) -> Decimal:
        """Return the subtotal multiplied by 60, without any rounding.

        Every item type has an exact subtotal in sixtieths (whole minutes for
        Hours), so these values add up to the same sum in any order.
        """
        with exact_arithmetic():
            if isinstance(self.item_type, Hours):
                return self.unit_price * self.item_type.total_minutes
            return self.unit_price * self.item_type.factor() * MINUTES_PER_HOUR

    def subtotal(self) -> Decimal:
        """Return unit price times the quantity implied by the item type.

        Hours subtotals are exact whenever the result terminates (500.00 at
        1:30 is 750.00); otherwise they carry the decimal context precision.
        """
        if isinstance(self.item_type, Hours):
            return self.scaled_subtotal() / MINUTES_PER_HOUR
        with exact_arithmetic():
            return self.unit_price * self.item_type.factor()
