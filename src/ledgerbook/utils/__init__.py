"""Utility functions for ledgerbook."""

from ledgerbook.utils.date_parser import parse_date, coerce_date, month_key, month_bounds
from ledgerbook.utils.amount_parser import parse_amount, to_amount

__all__ = ["parse_date", "coerce_date", "month_key", "month_bounds", "parse_amount", "to_amount"]
