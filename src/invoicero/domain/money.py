"""Exact decimal amounts."""

from decimal import MAX_PREC, Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from invoicero.domain.errors import ValidationError


def money(mantissa: int, scale: int = 2) -> Decimal:
    """Build an exact amount from a scaled integer.

    ``money(123400, 2)`` is ``Decimal("1234.00")``.
    """
    return Decimal(mantissa).scaleb(-scale)


def exact_arithmetic():
    """Context manager in which Decimal multiplication and addition never round.

    Division must stay outside: a non-terminating quotient cannot be held at
    this precision.
    """
    return localcontext(prec=MAX_PREC)


def to_decimal(value, field: str = "amount") -> Decimal:
    """Coerce an int, Decimal or numeric string into a Decimal.

    Floats are rejected because they cannot represent most decimal amounts.

    Raises:
        ValidationError: If the value is a float, bool or not a finite number
    """
    if isinstance(value, (bool, float)) or not isinstance(value, (Decimal, int, str)):
        raise ValidationError(f"{field} must be a Decimal, int or string, not {type(value).__name__}")

    try:
        result = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except InvalidOperation:
        raise ValidationError(f"Invalid {field}: '{value}' is not a number")

    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    return result


def quantize(amount: Decimal, exponent: int = 2) -> Decimal:
    """Round an amount to ``exponent`` decimal places, half up."""
    return amount.quantize(Decimal(1).scaleb(-exponent), rounding=ROUND_HALF_UP)
