"""Reconciliation domain service: bank matching and internal balance check."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    BalanceIssue,
    BankRecord,
    BookRecord,
    Direction,
    InternalCheckResult,
    ReconciliationSummary,
    Side,
    Voucher,
    VoucherStatus,
)
from ledgerbook.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    not_found,
    voucher_not_found,
)
from ledgerbook.utils.amount_parser import to_amount

logger = logging.getLogger(__name__)

BALANCE_TOLERANCE = Decimal("0.01")

DEFAULT_CASH_PREFIXES = ("1001", "1002")


def check_voucher_balances(
    vouchers: Iterable[Voucher], tolerance: Decimal = BALANCE_TOLERANCE
) -> InternalCheckResult:
    """Recompute totals of stored vouchers and flag the unbalanced ones.

    A voucher is flagged when its debit and credit totals differ by more
    than ``tolerance``.
    """
    total = 0
    issues = []
    for voucher in vouchers:
        total += 1
        total_debit = voucher.total_debit
        total_credit = voucher.total_credit
        difference = total_debit - total_credit
        if abs(difference) > tolerance:
            issues.append(
                BalanceIssue(
                    voucher_id=voucher.id,
                    voucher_no=voucher.voucher_no,
                    date=voucher.date,
                    description=voucher.description,
                    total_debit=total_debit,
                    total_credit=total_credit,
                    difference=difference,
                )
            )
    return InternalCheckResult(
        total_vouchers=total,
        balanced_vouchers=total - len(issues),
        unbalanced_vouchers=len(issues),
        issues=tuple(issues),
    )


def signed(amount: Decimal, direction: Direction) -> Decimal:
    return amount if direction == Direction.INCOME else -amount


class ReconciliationService:
    """Service for bank statement matching and ledger self-checks."""

    def __init__(self, db: Database, cash_prefixes: Sequence[str] = DEFAULT_CASH_PREFIXES):
        """Initialize reconciliation service.

        Args:
            db: Database instance
            cash_prefixes: Account code prefixes of cash and bank accounts,
                used to tell incoming from outgoing vouchers
        """
        self.db = db
        self.cash_prefixes = tuple(cash_prefixes)

    # Bank records

    def create_bank_record(
        self,
        date: date,
        description: str,
        amount,
        direction: "str | Direction",
        record_id: Optional[str] = None,
    ) -> BankRecord:
        """Enter a bank statement line, initially unmatched.

        Args:
            date: Statement date
            description: Statement text
            amount: Non-negative amount
            direction: income or expense
            record_id: Optional caller-assigned ID

        Returns:
            The stored bank record

        Raises:
            ValidationError: If a field is missing or invalid
        """
        if date is None:
            raise ValidationError("Bank record date is required")
        description = (description or "").strip()
        if not description:
            raise ValidationError("Bank record description is required")
        amount = to_amount(amount)
        try:
            direction = Direction(direction.lower() if isinstance(direction, str) else direction)
        except ValueError:
            raise ValidationError(
                f"Invalid bank record type '{direction}' (expected income or expense)"
            ) from None

        new_id = self.db.create_bank_record(
            date=date,
            description=description,
            amount=amount,
            direction=direction,
            record_id=record_id,
        )
        logger.info("Added bank record %s: %s %s", new_id, direction.value, amount)
        return self.db.get_bank_record(new_id)

    def get_bank_record(self, record_id: str) -> Optional[BankRecord]:
        return self.db.get_bank_record(record_id)

    def require_bank_record(self, record_id: str) -> BankRecord:
        record = self.db.get_bank_record(record_id)
        if record is None:
            raise NotFoundError(not_found("Bank record", record_id))
        return record

    def list_bank_records(self, matched: Optional[bool] = None) -> list[BankRecord]:
        """List bank records, newest first."""
        return self.db.list_bank_records(matched=matched)

    def delete_bank_record(self, record_id: str) -> None:
        """Delete an unmatched bank record.

        Raises:
            NotFoundError: If the record does not exist
            DependencyError: If the record is matched to a voucher
        """
        record = self.require_bank_record(record_id)
        if record.matched:
            raise DependencyError(
                f"Bank record {record_id} is matched to voucher "
                f"{record.matched_voucher_id}; unmatch it before deleting"
            )
        self.db.delete_bank_record(record_id)
        logger.info("Deleted bank record %s", record_id)

    # Matching

    def match(self, record_id: str, voucher_id: str) -> BankRecord:
        """Pair a bank record with a posted voucher.

        Amounts and dates are not compared. A bank record previously
        matched to the same voucher is released.

        Raises:
            NotFoundError: If the record or the voucher does not exist
            ValidationError: If the voucher is not posted
        """
        self.require_bank_record(record_id)
        voucher = self.db.get_voucher(voucher_id)
        if voucher is None:
            raise NotFoundError(voucher_not_found(voucher_id))
        if voucher.status != VoucherStatus.POSTED:
            raise ValidationError(
                f"Voucher {voucher.voucher_no} is not posted; only posted vouchers can be matched"
            )
        self.db.set_bank_record_match(record_id, voucher_id)
        logger.info("Matched bank record %s to voucher %s", record_id, voucher.voucher_no)
        return self.db.get_bank_record(record_id)

    def unmatch(self, record_id: str) -> BankRecord:
        """Clear a bank record's match.

        Raises:
            NotFoundError: If the record does not exist
        """
        self.require_bank_record(record_id)
        self.db.set_bank_record_match(record_id, None)
        logger.info("Unmatched bank record %s", record_id)
        return self.db.get_bank_record(record_id)

    def set_match(self, record_id: str, matched: bool, voucher_id: Optional[str] = None) -> BankRecord:
        """Toggle a match as the REST endpoint does.

        Raises:
            ValidationError: If ``matched`` is set without a voucher id
        """
        if not matched:
            return self.unmatch(record_id)
        if not voucher_id:
            raise ValidationError("matchedVoucherId is required when matched is true")
        return self.match(record_id, voucher_id)

    # Checks

    def internal_check(self) -> InternalCheckResult:
        """Recheck the balance of every posted voucher from its stored lines."""
        vouchers = self.db.list_vouchers(status=VoucherStatus.POSTED.value, ascending=True)
        result = check_voucher_balances(vouchers)
        if result.unbalanced_vouchers:
            logger.warning(
                "Internal check found %d unbalanced posted voucher(s): %s",
                result.unbalanced_vouchers,
                ", ".join(issue.voucher_no for issue in result.issues),
            )
        return result

    def is_cash_account(self, code: str) -> bool:
        return code.startswith(self.cash_prefixes)

    def book_record(self, voucher: Voucher, matched: bool = False) -> BookRecord:
        """View a posted voucher as a bank-side movement.

        The amount is the larger of the two totals. The direction follows
        the first cash line: a debit is money coming in. Vouchers without a
        cash line count as income.
        """
        cash_line = next((l for l in voucher.lines if self.is_cash_account(l.account)), None)
        if cash_line is None or cash_line.side == Side.DEBIT:
            direction = Direction.INCOME
        else:
            direction = Direction.EXPENSE
        return BookRecord(
            voucher_id=voucher.id,
            voucher_no=voucher.voucher_no,
            date=voucher.date,
            description=voucher.description,
            amount=max(voucher.total_debit, voucher.total_credit),
            direction=direction,
            matched=matched,
        )

    def book_records(self) -> list[BookRecord]:
        """Posted vouchers as book records, newest first."""
        matched_ids = {
            r.matched_voucher_id for r in self.db.list_bank_records(matched=True)
        }
        return [
            self.book_record(v, matched=v.id in matched_ids)
            for v in self.db.list_vouchers(status=VoucherStatus.POSTED.value)
        ]

    def summary(self) -> ReconciliationSummary:
        """Compare bank records with the posted book.

        Totals are signed (income positive); ``difference`` is the absolute
        gap between them.
        """
        bank = self.db.list_bank_records()
        book = self.book_records()
        bank_total = sum((signed(r.amount, r.direction) for r in bank), Decimal("0"))
        book_total = sum((signed(r.amount, r.direction) for r in book), Decimal("0"))
        return ReconciliationSummary(
            matched_count=sum(1 for r in bank if r.matched),
            unmatched_bank_count=sum(1 for r in bank if not r.matched),
            unmatched_book_count=sum(1 for r in book if not r.matched),
            bank_total=bank_total,
            book_total=book_total,
            difference=abs(bank_total - book_total),
        )
