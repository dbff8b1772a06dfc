"""Accounting period (month-end close) domain service."""

import logging
from datetime import date, datetime, UTC
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    AccountingPeriod,
    PeriodCheck,
    PeriodStatus,
    TaxStatus,
    VoucherStatus,
)
from ledgerbook.domain.errors import (
    ClosedPeriodError,
    DuplicateKeyError,
    NotFoundError,
    StatusTransitionError,
    ValidationError,
    not_found,
)
from ledgerbook.domain.workflow import PERIOD_WORKFLOW
from ledgerbook.utils.date_parser import month_bounds, month_key

logger = logging.getLogger(__name__)


def period_key(value: "date | str") -> str:
    """Normalize a date or ``YYYY-MM`` string to a period key.

    Raises:
        ValidationError: If the string is not a valid ``YYYY-MM`` period
    """
    if isinstance(value, date):
        return month_key(value)
    try:
        start, _ = month_bounds(value)
    except ValueError as e:
        raise ValidationError(str(e)) from None
    return month_key(start)


class PeriodService:
    """Service for opening, checking and closing monthly periods."""

    def __init__(self, db: Database):
        """Initialize period service.

        Args:
            db: Database instance
        """
        self.db = db

    def open_period(self, period: str) -> AccountingPeriod:
        """Register a period in the open state.

        Raises:
            ValidationError: If the period is malformed
            DuplicateKeyError: If the period already exists
        """
        key = period_key(period)
        if self.db.get_period(key) is not None:
            raise DuplicateKeyError("period", key, f"Accounting period {key} already exists")
        self.db.create_period(key)
        logger.info("Opened accounting period %s", key)
        return self.db.get_period(key)

    def get_period(self, period: str) -> Optional[AccountingPeriod]:
        return self.db.get_period(period_key(period))

    def require_period(self, period: str) -> AccountingPeriod:
        key = period_key(period)
        found = self.db.get_period(key)
        if found is None:
            raise NotFoundError(not_found("Accounting period", key))
        return found

    def list_periods(self, status: Optional[str] = None) -> list[AccountingPeriod]:
        """List periods in chronological order, optionally by status."""
        if status is not None:
            status = PERIOD_WORKFLOW.coerce(status).value
        return self.db.list_periods(status=status)

    def check_period(self, period: str) -> PeriodCheck:
        """Count the items that would block closing a period.

        Vouchers and bank records are counted by date; tax records by the
        period they were filed for. The period does not need to be
        registered.
        """
        key = period_key(period)
        start, end = month_bounds(key)
        pending_vouchers = self.db.list_vouchers(
            status=VoucherStatus.PENDING.value, start_date=start, end_date=end
        )
        unmatched = self.db.list_bank_records(matched=False, start_date=start, end_date=end)
        pending_tax = [
            r for r in self.db.list_tax_records(period=key) if r.status == TaxStatus.PENDING
        ]
        return PeriodCheck(
            period=key,
            pending_vouchers=len(pending_vouchers),
            unmatched_bank_records=len(unmatched),
            pending_tax_records=len(pending_tax),
        )

    def close_period(self, period: str, closed_by: Optional[str] = None) -> AccountingPeriod:
        """Close a period.

        An unregistered period is registered on the fly before closing.

        Args:
            period: ``YYYY-MM`` key
            closed_by: Name recorded as the closer

        Returns:
            The closed period

        Raises:
            StatusTransitionError: If the period is already closed
            ValidationError: If pending vouchers, unmatched bank records or
                pending tax records remain in the period
        """
        key = period_key(period)
        current = self.db.get_period(key)
        current_status = current.status if current is not None else PeriodStatus.OPEN
        if not PERIOD_WORKFLOW.advance(current_status, PeriodStatus.CLOSED):
            raise StatusTransitionError(f"Accounting period {key} is already closed")

        check = self.check_period(key)
        if not check.can_close:
            raise ValidationError(
                f"Cannot close period {key}: {check.pending_vouchers} pending voucher(s), "
                f"{check.unmatched_bank_records} unmatched bank record(s), "
                f"{check.pending_tax_records} pending tax record(s)"
            )

        if current is None:
            self.db.create_period(key)
        self.db.update_period_status(
            key,
            PeriodStatus.CLOSED.value,
            closed_at=datetime.now(UTC),
            closed_by=closed_by,
        )
        logger.info("Closed accounting period %s", key)
        return self.db.get_period(key)

    def reopen_period(self, period: str) -> AccountingPeriod:
        """Reopen a closed period and clear its closing metadata.

        Raises:
            NotFoundError: If the period is not registered
            StatusTransitionError: If the period is not closed
        """
        current = self.require_period(period)
        if current.status != PeriodStatus.CLOSED:
            raise StatusTransitionError(f"Accounting period {current.period} is not closed")
        self.db.update_period_status(current.period, PeriodStatus.OPEN.value)
        logger.info("Reopened accounting period %s", current.period)
        return self.db.get_period(current.period)

    def is_closed(self, value: "date | str") -> bool:
        found = self.db.get_period(period_key(value))
        return found is not None and found.status == PeriodStatus.CLOSED

    def ensure_open(self, value: "date | str") -> None:
        """Raise ClosedPeriodError if ``value`` falls in a closed period."""
        if self.is_closed(value):
            raise ClosedPeriodError(
                f"Accounting period {period_key(value)} is closed; reopen it before "
                "recording or posting vouchers dated in it"
            )
