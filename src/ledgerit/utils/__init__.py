"""Utility functions for ledgerit."""

from ledgerit.utils.date_parser import parse_date
from ledgerit.utils.amount_parser import format_amount, parse_amount, parse_minor_units
from ledgerit.utils.account_resolver import resolve_account

__all__ = ["parse_date", "parse_amount", "parse_minor_units", "format_amount", "resolve_account"]
