"""Identifier value objects: registration numbers, IBANs, currencies and invoice numbers.

Parsing only checks format and checksums. Nothing here touches the network.
"""

import re
from dataclasses import dataclass
from enum import Enum

from invoicero.domain.errors import (
    InvalidIbanError,
    InvalidInvoiceNumberError,
    InvalidRegistrationNumberError,
    UnsupportedCurrencyError,
    invalid_iban,
    invalid_invoice_number,
    invalid_registration_number,
    unsupported_currency,
)

# National IBAN lengths for the countries invoices are usually paid from.
# Countries missing here only get the generic 15-34 length check.
IBAN_LENGTHS = {
    "AT": 20,
    "BE": 16,
    "CH": 21,
    "CZ": 24,
    "DE": 22,
    "DK": 18,
    "ES": 24,
    "FR": 27,
    "GB": 22,
    "HU": 28,
    "IE": 22,
    "IT": 27,
    "NL": 18,
    "PL": 28,
    "SI": 19,
    "SK": 24,
}

_IBAN_PATTERN = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{11,30}")
_INVOICE_NUMBER_PATTERN = re.compile(r"(?P<year>[0-9]{4})(?P<sequence>[0-9]{2,6})")


def _is_ascii_digits(text: str) -> bool:
    # str.isdigit also accepts superscripts and full-width digits
    return text.isascii() and text.isdigit()


@dataclass(frozen=True)
class RegistrationNumber:
    """Czech/Slovak company registration number (IČO)."""

    value: str

    def __post_init__(self):
        if len(self.value) != 8 or not _is_ascii_digits(self.value):
            raise InvalidRegistrationNumberError(
                invalid_registration_number(self.value, "expected 8 digits")
            )
        if self.value[-1] != str(self.check_digit(self.value)):
            raise InvalidRegistrationNumberError(
                invalid_registration_number(self.value, "check digit mismatch")
            )

    @staticmethod
    def check_digit(number: str) -> int:
        """Return the mod-11 check digit for the first seven digits of ``number``."""
        weighted = sum(int(digit) * weight for digit, weight in zip(number[:7], range(8, 1, -1)))
        return (11 - weighted % 11) % 10

    @classmethod
    def parse(cls, text: str) -> "RegistrationNumber":
        """Parse a registration number, zero-padding short numbers to 8 digits.

        Args:
            text: Registration number, e.g. "27082440" or "679313"

        Returns:
            RegistrationNumber in canonical 8-digit form

        Raises:
            InvalidRegistrationNumberError: If the text is not 1-8 digits or the
                check digit does not match
        """
        number = text.strip().replace(" ", "")
        if not _is_ascii_digits(number):
            raise InvalidRegistrationNumberError(
                invalid_registration_number(text, "must contain only digits")
            )
        if len(number) > 8:
            raise InvalidRegistrationNumberError(
                invalid_registration_number(text, "longer than 8 digits")
            )
        return cls(number.zfill(8))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Iban:
    """International bank account number in electronic (unspaced) form."""

    value: str

    def __post_init__(self):
        if not _IBAN_PATTERN.fullmatch(self.value):
            raise InvalidIbanError(
                invalid_iban(self.value, "expected country code, check digits and 11-30 alphanumerics")
            )
        expected_length = IBAN_LENGTHS.get(self.country_code)
        if expected_length is not None and len(self.value) != expected_length:
            raise InvalidIbanError(
                invalid_iban(
                    self.value,
                    f"{self.country_code} IBANs have {expected_length} characters, got {len(self.value)}",
                )
            )
        if self.checksum(self.value) != 1:
            raise InvalidIbanError(invalid_iban(self.value, "checksum mismatch"))

    @staticmethod
    def checksum(value: str) -> int:
        """Return the ISO 13616 mod-97 remainder (1 for a valid IBAN)."""
        rearranged = value[4:] + value[:4]
        digits = "".join(str(int(char, 36)) for char in rearranged)
        return int(digits) % 97

    @classmethod
    def parse(cls, text: str) -> "Iban":
        """Parse an IBAN written with or without spaces.

        Raises:
            InvalidIbanError: If the IBAN is malformed or fails the checksum
        """
        return cls("".join(text.split()).upper())

    @property
    def country_code(self) -> str:
        return self.value[:2]

    @property
    def bank_code(self) -> str:
        """Four-digit bank code of a CZ/SK IBAN."""
        return self.value[4:8]

    @property
    def formatted(self) -> str:
        """IBAN in print form, grouped into blocks of four."""
        return " ".join(self.value[i : i + 4] for i in range(0, len(self.value), 4))

    def to_bank_account_number(self) -> str:
        """Return the domestic account number, e.g. ``19-2000145399/0800``.

        Only CZ and SK IBANs carry a domestic account number; for other
        countries the print form of the IBAN is returned.
        """
        if self.country_code not in ("CZ", "SK"):
            return self.formatted

        prefix = self.value[8:14].lstrip("0")
        number = self.value[14:].lstrip("0") or "0"
        if prefix:
            return f"{prefix}-{number}/{self.bank_code}"
        return f"{number}/{self.bank_code}"

    def __str__(self) -> str:
        return self.value


class Currency(Enum):
    """Supported invoice currencies."""

    CZK = ("CZK", "Kč", 2)
    EUR = ("EUR", "€", 2)
    USD = ("USD", "$", 2)

    def __init__(self, code: str, symbol: str, exponent: int):
        self.code = code
        self.symbol = symbol
        self.exponent = exponent

    @classmethod
    def parse(cls, text: str) -> "Currency":
        """Parse an ISO 4217 code (case-insensitive).

        Raises:
            UnsupportedCurrencyError: If the code is not supported
        """
        code = text.strip().upper()
        for currency in cls:
            if currency.code == code:
                return currency
        raise UnsupportedCurrencyError(unsupported_currency(text, [c.code for c in cls]))

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class InvoiceNumber:
    """Invoice number made of a four-digit year and a sequence, e.g. ``202403``."""

    value: str

    def __post_init__(self):
        match = _INVOICE_NUMBER_PATTERN.fullmatch(self.value)
        if match is None or int(match.group("sequence")) == 0:
            raise InvalidInvoiceNumberError(invalid_invoice_number(self.value))

    @classmethod
    def parse(cls, text: str) -> "InvoiceNumber":
        """Parse an invoice number.

        Raises:
            InvalidInvoiceNumberError: If the text is not YYYY followed by 2-6 digits
        """
        return cls(text.strip())

    @property
    def year(self) -> int:
        return int(self.value[:4])

    @property
    def sequence(self) -> int:
        return int(self.value[4:])

    def __str__(self) -> str:
        return self.value
