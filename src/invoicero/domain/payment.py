"""Payment methods."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from invoicero.domain.errors import InvalidVariableSymbolError, invalid_variable_symbol

_VARIABLE_SYMBOL_PATTERN = re.compile(r"[0-9]{1,10}")


def parse_variable_symbol(text: str) -> str:
    """Validate a Czech/Slovak variable symbol (1-10 digits).

    Raises:
        InvalidVariableSymbolError: If the symbol is not 1-10 digits
    """
    symbol = text.strip()
    if not _VARIABLE_SYMBOL_PATTERN.fullmatch(symbol):
        raise InvalidVariableSymbolError(invalid_variable_symbol(text))
    return symbol


@dataclass(frozen=True)
class BankTransfer:
    """Payment to the invoice IBAN, identified by a variable symbol.

    Without an explicit variable symbol the invoice number is used.
    """

    variable_symbol: Optional[str] = None

    def __post_init__(self):
        if self.variable_symbol is not None:
            object.__setattr__(self, "variable_symbol", parse_variable_symbol(self.variable_symbol))

    def __str__(self) -> str:
        return "Bankovním převodem"


@dataclass(frozen=True)
class Cash:
    def __str__(self) -> str:
        return "Hotově"


@dataclass(frozen=True)
class Card:
    card_number: str

    def __str__(self) -> str:
        return f"Platba kartou: {self.card_number}"


PaymentMethod = Union[BankTransfer, Cash, Card]
