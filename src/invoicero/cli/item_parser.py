"""CLI helpers for parsing invoice item options."""

import re

from invoicero.domain.items import Hours, InvoiceItem, Other, Quantity
from invoicero.utils.amount_parser import parse_amount

_HOURS_PATTERN = re.compile(r"^(?P<hours>\d+)(?::(?P<minutes>\d{1,2}))?\s*h$")
_COUNT_PATTERN = re.compile(r"^\d+(?:[.,]\d+)?$")


def parse_item_spec(spec: str) -> InvoiceItem:
    """Parse an ``--item`` value into an InvoiceItem.

    The value has the form ``QUANTITY;UNIT_PRICE;DESCRIPTION``. QUANTITY is
    one of:
    - hours, optionally with minutes: "2h", "1:30h"
    - a count of units: "3", "2.5"
    - any other text, used as the label of a fixed-price line: "paušál"

    Examples:
        "1:30h;350;Programming"
        "3;150.00;Licences"

    Raises:
        ValueError: If the value does not have three parts or a part is invalid
    """
    parts = [part.strip() for part in spec.split(";", 2)]
    if len(parts) != 3 or not all(parts):
        raise ValueError(
            f"Invalid item '{spec}': expected QUANTITY;UNIT_PRICE;DESCRIPTION"
        )
    quantity, price, description = parts

    hours_match = _HOURS_PATTERN.match(quantity)
    if hours_match:
        item_type = Hours(
            int(hours_match.group("hours")), int(hours_match.group("minutes") or 0)
        )
    elif _COUNT_PATTERN.match(quantity):
        item_type = Quantity(parse_amount(quantity))
    else:
        item_type = Other(quantity)

    return InvoiceItem(item_type, description, parse_amount(price))
