"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from ledgerbook.domain.errors import ValidationError

CENT = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a typed-in amount into a Decimal.

    Accepted forms include "1000", "1,234.56", "¥1000", "-12.50" and
    "(12.50)" (accounting notation for a negative number).

    Args:
        amount_str: Amount as entered on the command line

    Returns:
        Decimal amount

    Raises:
        ValueError: If the string is not a number
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()
    negative = text.startswith("(") and text.endswith(")")
    if negative:
        text = text[1:-1]

    text = re.sub(r"[$€£¥\s]", "", text).replace(",", "")

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'") from None
    return -amount if negative else amount


def to_amount(value: "Decimal | int | float | str", field: str = "amount", allow_negative: bool = False) -> Decimal:
    """Coerce a raw value into a finite Decimal amount.

    Floats go through ``str`` so 0.1 stays 0.1 rather than its binary
    expansion.

    Args:
        value: Raw amount from a caller
        field: Field name used in error messages
        allow_negative: Accept values below zero (opening balances)

    Returns:
        Decimal amount

    Raises:
        ValidationError: If the value is missing, not a number, not finite,
            finer than a cent, or negative when that is not allowed
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        try:
            amount = parse_amount(str(value))
        except ValueError:
            raise ValidationError(f"Invalid {field} '{value}'") from None

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    require_cents(amount, field)
    if not allow_negative and amount < 0:
        raise ValidationError(f"{field} must not be negative")
    return amount


def is_cent_exact(amount: Decimal) -> bool:
    """Return True when the amount has no digits below the cent ("1.500" is)."""
    return amount.normalize().as_tuple().exponent >= CENT.as_tuple().exponent


def require_cents(amount: Decimal, field: str = "amount") -> None:
    """Reject a finite amount carrying more than two decimal places.

    Amounts are stored with cent precision, so anything finer would be
    rounded on save.

    Raises:
        ValidationError: If the amount is finer than a cent
    """
    if amount.is_finite() and not is_cent_exact(amount):
        raise ValidationError(f"{field} must not have more than two decimal places, got {amount}")
