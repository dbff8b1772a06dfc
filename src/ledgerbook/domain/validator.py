"""Balance check for voucher entry lines.

A voucher may only be stored when its debit legs and credit legs add up to
the same, strictly positive total. The comparison here is exact; the
reconciliation internal check applies a 0.01 tolerance instead, because it
audits stored data that may have drifted through other paths.
"""

from decimal import Decimal
from typing import Sequence

from ledgerbook.domain.entities import EntryLine, Side, ValidationResult
from ledgerbook.domain.errors import UnbalancedVoucherError
from ledgerbook.utils.amount_parser import is_cent_exact

MIN_LINES = 2

ZERO = Decimal("0")


def line_totals(lines: Sequence[EntryLine]) -> tuple[Decimal, Decimal]:
    """Return (total_debit, total_credit) over finite line amounts."""
    total_debit = ZERO
    total_credit = ZERO
    for line in lines:
        if not line.amount.is_finite():
            continue
        if line.side == Side.DEBIT:
            total_debit += line.amount
        else:
            total_credit += line.amount
    return total_debit, total_credit


def validate_lines(lines: Sequence[EntryLine]) -> ValidationResult:
    """Check entry lines for the double-entry balance invariant.

    Pure function: nothing is read from or written to storage.

    Args:
        lines: Proposed entry lines of one voucher

    Returns:
        ValidationResult with ``balanced`` set when the lines may be saved
    """
    total_debit, total_credit = line_totals(lines)
    difference = total_debit - total_credit

    def rejected(reason: str) -> ValidationResult:
        return ValidationResult(False, total_debit, total_credit, difference, reason)

    if len(lines) < MIN_LINES:
        return rejected(f"A voucher needs at least {MIN_LINES} entry lines, got {len(lines)}")

    for index, line in enumerate(lines, start=1):
        if not line.amount.is_finite():
            return rejected(f"Line {index}: amount must be a finite number")
        if line.amount < 0:
            return rejected(f"Line {index}: amount must not be negative")
        if not is_cent_exact(line.amount):
            return rejected(f"Line {index}: amount must not have more than two decimal places")

    if total_debit != total_credit:
        return rejected(
            f"Debits ({total_debit}) do not equal credits ({total_credit}), "
            f"difference {difference}"
        )
    if total_debit <= 0:
        return rejected("Voucher total must be greater than zero")

    return ValidationResult(True, total_debit, total_credit, difference)


def require_balanced(lines: Sequence[EntryLine]) -> ValidationResult:
    """Validate lines and raise when they are not balanced.

    Raises:
        UnbalancedVoucherError: Carrying the difference and both totals
    """
    result = validate_lines(lines)
    if not result.balanced:
        raise UnbalancedVoucherError(
            difference=result.difference,
            total_debit=result.total_debit,
            total_credit=result.total_credit,
            reason=result.reason,
        )
    return result
