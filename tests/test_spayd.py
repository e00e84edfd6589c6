"""Tests for SPAYD payment payloads."""

from decimal import Decimal

import pytest

from invoicero.domain.errors import InvalidVariableSymbolError, ValidationError
from invoicero.domain.identifiers import Currency, Iban
from invoicero.domain.payment import BankTransfer, parse_variable_symbol
from invoicero.domain.spayd import build_spayd

IBAN = Iban.parse("CZ6508000000192000145399")


def test_minimal_payload():
    """Test a payload with account, amount and currency only."""
    payload = build_spayd(IBAN, Decimal("750"), Currency.CZK)
    assert payload == "SPD*1.0*ACC:CZ6508000000192000145399*AM:750.00*CC:CZK"


def test_payload_with_variable_symbol():
    """Test that the variable symbol is appended as X-VS."""
    payload = build_spayd(IBAN, Decimal("1250.00"), Currency.CZK, variable_symbol="202403")
    assert payload.endswith("*CC:CZK*X-VS:202403")


def test_amount_rounded_to_two_decimals():
    """Test that amounts are rounded half up to two decimals."""
    payload = build_spayd(IBAN, Decimal("10.005"), Currency.EUR)
    assert "*AM:10.01*" in payload


def test_message_escaped_and_truncated():
    """Test that '*' is escaped and long messages are cut to 60 characters."""
    payload = build_spayd(IBAN, Decimal("1"), Currency.CZK, message="a*b")
    assert "*MSG:a%2Ab" in payload

    payload = build_spayd(IBAN, Decimal("1"), Currency.CZK, message="x" * 80)
    assert "*MSG:" + "x" * 60 + "*" not in payload
    assert payload.endswith("*MSG:" + "x" * 60)


def test_blank_message_omitted():
    """Test that a whitespace-only message adds no MSG field."""
    payload = build_spayd(IBAN, Decimal("1"), Currency.CZK, message="   ")
    assert "MSG" not in payload
    assert payload == "SPD*1.0*ACC:CZ6508000000192000145399*AM:1.00*CC:CZK"


def test_escaped_message_within_limit():
    """Test that the limit applies after escaping and keeps escapes whole."""
    payload = build_spayd(IBAN, Decimal("1"), Currency.CZK, message="*" * 30)
    message = payload.split("*MSG:")[1]
    assert len(message) <= 60
    assert message == "%2A" * 20

    payload = build_spayd(IBAN, Decimal("1"), Currency.CZK, message="x" * 58 + "*" + "y")
    message = payload.split("*MSG:")[1]
    assert message == "x" * 58


def test_non_positive_amount_rejected():
    """Test that zero and negative amounts are rejected."""
    for amount in [Decimal("0"), Decimal("-1"), Decimal("0.004")]:
        with pytest.raises(ValidationError, match="Payment amount"):
            build_spayd(IBAN, amount, Currency.CZK)


def test_too_large_amount_rejected():
    """Test that amounts above the SPAYD limit are rejected."""
    with pytest.raises(ValidationError):
        build_spayd(IBAN, Decimal("10000000.00"), Currency.CZK)


def test_invalid_variable_symbol_rejected():
    """Test that variable symbols must be 1-10 digits."""
    with pytest.raises(InvalidVariableSymbolError):
        build_spayd(IBAN, Decimal("1"), Currency.CZK, variable_symbol="12345678901")


class TestVariableSymbol:
    """Tests for variable symbol validation."""

    def test_valid(self):
        """Test valid variable symbols."""
        assert parse_variable_symbol(" 0012 ") == "0012"
        assert BankTransfer("202403").variable_symbol == "202403"

    def test_invalid(self):
        """Test invalid variable symbols."""
        for text in ["", "12a", "12345678901", "-1", "\uff11\uff12", "123\n4"]:
            with pytest.raises(InvalidVariableSymbolError):
                parse_variable_symbol(text)
        with pytest.raises(InvalidVariableSymbolError):
            BankTransfer("VS-1")
