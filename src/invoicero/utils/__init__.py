"""Utility functions for invoicero."""

from invoicero.utils.date_parser import parse_date, format_date
from invoicero.utils.amount_parser import parse_amount
from invoicero.utils.money_format import format_money

__all__ = ["parse_date", "format_date", "parse_amount", "format_money"]
