"""Voucher lifecycle domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    BatchPostResult,
    EntryLine,
    Side,
    Voucher as VoucherEntity,
    VoucherStatus,
)
from ledgerbook.domain.errors import (
    DuplicateVoucherNumberError,
    NotFoundError,
    ValidationError,
    voucher_not_found,
)
from ledgerbook.domain.period import PeriodService
from ledgerbook.domain.validator import require_balanced
from ledgerbook.domain.workflow import VOUCHER_WORKFLOW
from ledgerbook.utils.amount_parser import parse_amount, require_cents

logger = logging.getLogger(__name__)


def make_line(account: str, side: "str | Side", amount, memo: Optional[str] = "") -> EntryLine:
    """Build an EntryLine from raw values.

    Raises:
        ValidationError: If the account is blank, the side is unknown, or the
            amount is not a number or is finer than a cent
    """
    account = (account or "").strip()
    if not account:
        raise ValidationError("Entry line account is required")
    try:
        line_side = Side(side.lower() if isinstance(side, str) else side)
    except ValueError:
        raise ValidationError(f"Invalid side '{side}' (expected debit or credit)") from None
    # Sign and finiteness are judged by the validator, not here
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        amount = Decimal(str(amount))
    elif not isinstance(amount, Decimal):
        try:
            amount = parse_amount(str(amount))
        except ValueError:
            raise ValidationError(f"Invalid amount '{amount}'") from None
    require_cents(amount)
    return EntryLine(account=account, amount=amount, side=line_side, memo=memo or "")


class VoucherService:
    """Service for creating and posting journal vouchers."""

    def __init__(self, db: Database):
        """Initialize voucher service.

        Args:
            db: Database instance
        """
        self.db = db
        self.periods = PeriodService(db)

    def create_voucher(
        self,
        voucher_no: str,
        date: date,
        lines: Sequence[EntryLine],
        description: str = "",
        voucher_id: Optional[str] = None,
    ) -> VoucherEntity:
        """Validate and store a new voucher in the pending state.

        Args:
            voucher_no: Unique human-facing voucher number
            date: Voucher date
            lines: Entry lines; account is the account code
            description: Free-text description
            voucher_id: Optional caller-assigned ID

        Returns:
            The stored voucher

        Raises:
            ValidationError: If the number is blank or a line names an
                unknown account code
            UnbalancedVoucherError: If the lines are not balanced
            ClosedPeriodError: If the date falls in a closed period
            DuplicateVoucherNumberError: If the number is already used
        """
        voucher_no = (voucher_no or "").strip()
        if not voucher_no:
            raise ValidationError("Voucher number is required")
        if date is None:
            raise ValidationError("Voucher date is required")
        lines = tuple(lines)

        require_balanced(lines)

        known = {account.code for account in self.db.list_accounts()}
        unknown = sorted({line.account for line in lines} - known)
        if unknown:
            raise ValidationError(f"Unknown account code(s): {', '.join(unknown)}")

        self.periods.ensure_open(date)

        if self.db.get_voucher_by_number(voucher_no) is not None:
            raise DuplicateVoucherNumberError(voucher_no)

        new_id = self.db.create_voucher(
            voucher_no=voucher_no,
            date=date,
            description=description or "",
            lines=lines,
            status=VOUCHER_WORKFLOW.initial.value,
            voucher_id=voucher_id,
        )
        logger.info("Created voucher %s dated %s with %d lines", voucher_no, date, len(lines))
        return self.db.get_voucher(new_id)

    def get_voucher(self, voucher_id: str) -> Optional[VoucherEntity]:
        """Get voucher by ID.

        Args:
            voucher_id: Voucher ID

        Returns:
            Voucher entity or None if not found
        """
        return self.db.get_voucher(voucher_id)

    def require_voucher(self, voucher_id: str) -> VoucherEntity:
        voucher = self.db.get_voucher(voucher_id)
        if voucher is None:
            raise NotFoundError(voucher_not_found(voucher_id))
        return voucher

    def list_vouchers(self, status: "str | VoucherStatus | None" = None) -> list[VoucherEntity]:
        """List vouchers, newest date first.

        Args:
            status: Optional status filter (pending or posted)
        """
        if status is not None:
            status = VOUCHER_WORKFLOW.coerce(status).value
        return self.db.list_vouchers(status=status)

    def list_pending(self) -> list[VoucherEntity]:
        return self.list_vouchers(VoucherStatus.PENDING)

    def list_posted(self) -> list[VoucherEntity]:
        return self.list_vouchers(VoucherStatus.POSTED)

    def post_voucher(self, voucher_id: str) -> VoucherEntity:
        """Post a voucher.

        Posting an already-posted voucher leaves it posted.

        Raises:
            NotFoundError: If the voucher does not exist
            ClosedPeriodError: If the voucher date is in a closed period
        """
        self.post_batch([voucher_id])
        return self.db.get_voucher(voucher_id)

    def post_batch(self, voucher_ids: Iterable[str]) -> BatchPostResult:
        """Post several vouchers in one transaction.

        Every id is checked before anything changes; one bad id leaves all
        vouchers untouched.

        Args:
            voucher_ids: Voucher IDs; duplicates are ignored

        Returns:
            Which vouchers were posted now and which were already posted

        Raises:
            NotFoundError: If any id does not exist
            ClosedPeriodError: If any voucher is dated in a closed period
        """
        ids = list(dict.fromkeys(voucher_ids))
        to_post: list[str] = []
        already: list[str] = []
        for voucher_id in ids:
            voucher = self.require_voucher(voucher_id)
            if VOUCHER_WORKFLOW.advance(voucher.status, VoucherStatus.POSTED):
                self.periods.ensure_open(voucher.date)
                to_post.append(voucher_id)
            else:
                already.append(voucher_id)

        if to_post:
            self.db.update_vouchers_status(to_post, VoucherStatus.POSTED.value)
            logger.info("Posted %d voucher(s): %s", len(to_post), ", ".join(to_post))
        return BatchPostResult(posted=tuple(to_post), already_posted=tuple(already))

    def post_all_pending(self) -> BatchPostResult:
        """Post every pending voucher in one transaction."""
        return self.post_batch(v.id for v in self.list_pending())

    def set_status(self, voucher_id: str, status: "str | VoucherStatus") -> VoucherEntity:
        """Apply a requested status to a voucher.

        Raises:
            NotFoundError: If the voucher does not exist
            ValidationError: If the status is unknown
            StatusTransitionError: If a posted voucher is set back to pending
        """
        voucher = self.require_voucher(voucher_id)
        target = VOUCHER_WORKFLOW.coerce(status)
        VOUCHER_WORKFLOW.advance(voucher.status, target)
        if target == VoucherStatus.POSTED:
            return self.post_voucher(voucher_id)
        return voucher
