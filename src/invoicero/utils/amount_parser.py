"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "123,45" (decimal comma)
    - "1 234,56 Kč"
    - "-€123.45"
    - "1,234.56"
    - "€1.234,56"
    - "(123.45)" (negative in parentheses)

    A single comma without a dot is read as a decimal comma. When both
    separators appear, the last one is the decimal separator.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols and codes
    amount_str = re.sub(r"Kč|CZK|EUR|USD|[$€£]", "", amount_str)

    # Remove whitespace used as thousands separator
    amount_str = re.sub(r"\s+", "", amount_str)

    # With both separators the later one is the decimal separator:
    # "1.234,56" and "1,234.56" are both 1234.56
    if "," in amount_str and "." in amount_str:
        if amount_str.rfind(",") > amount_str.rfind("."):
            amount_str = amount_str.replace(".", "").replace(",", ".")
        else:
            amount_str = amount_str.replace(",", "")
    elif amount_str.count(",") == 1:
        amount_str = amount_str.replace(",", ".")
    elif amount_str.count(",") > 1:
        amount_str = amount_str.replace(",", "")
    elif amount_str.count(".") > 1:
        amount_str = amount_str.replace(".", "")

    if not amount_str.isascii():
        raise ValueError(f"Could not parse amount '{amount_str}'")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    if is_negative:
        amount = -amount
    return amount
