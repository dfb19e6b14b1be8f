"""Amount parsing utilities.

Ledger amounts are integers in minor currency units (cents). These helpers
convert between that representation and the decimal strings people type and
banks print.
"""

from decimal import Decimal, InvalidOperation
import re

MINOR_UNITS_PER_MAJOR = 100


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency symbols, thousands separators and whitespace
    amount_str = re.sub(r"[$€£¥,\s]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit Decimal into integer minor units.

    Raises:
        ValueError: If the amount has more precision than one minor unit
    """
    scaled = amount * MINOR_UNITS_PER_MAJOR
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Amount {amount} has more than two decimal places")
    return int(scaled)


def parse_minor_units(amount_str: str) -> int:
    """Parse a major-unit amount string such as "-1,234.56" into minor units."""
    return to_minor_units(parse_amount(amount_str))


def format_amount(minor_units: int) -> str:
    """Format minor units as a major-unit string, e.g. -123456 -> "-1,234.56"."""
    sign = "-" if minor_units < 0 else ""
    major, minor = divmod(abs(minor_units), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{major:,}.{minor:02d}"
