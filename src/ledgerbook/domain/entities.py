"""Domain model entities for ledgerbook.

These are pure data classes representing accounting concepts, independent of
the database schema. Services and outer surfaces only ever see these types;
the ORM models stay behind the database layer.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from typing import Optional


class AccountType(str, enum.Enum):
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def is_debit_normal(self) -> bool:
        """Asset and expense accounts grow on the debit side."""
        return self in (AccountType.ASSET, AccountType.EXPENSE)


class Side(str, enum.Enum):
    DEBIT = "debit"
    CREDIT = "credit"


class VoucherStatus(str, enum.Enum):
    PENDING = "pending"
    POSTED = "posted"


class Direction(str, enum.Enum):
    INCOME = "income"
    EXPENSE = "expense"


class PeriodStatus(str, enum.Enum):
    OPEN = "open"
    CLOSED = "closed"


class PurchaseOrderStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    COMPLETED = "completed"


class SalesInvoiceStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"


class ExpenseStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TaxStatus(str, enum.Enum):
    PENDING = "pending"
    DECLARED = "declared"
    PAID = "paid"


@dataclass(frozen=True)
class Account:
    """Ledger account in the chart of accounts."""

    id: str
    code: str
    name: str
    type: AccountType
    balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class EntryLine:
    """One debit or credit leg of a voucher.

    ``account`` is the account code, not the account id.
    """

    account: str
    amount: Decimal
    side: Side
    memo: str = ""


@dataclass(frozen=True)
class Voucher:
    """Journal voucher: one atomic double-entry transaction."""

    id: str
    voucher_no: str
    date: date
    description: str
    lines: tuple[EntryLine, ...]
    status: VoucherStatus
    created_at: datetime

    @property
    def total_debit(self) -> Decimal:
        return sum((l.amount for l in self.lines if l.side == Side.DEBIT), Decimal("0"))

    @property
    def total_credit(self) -> Decimal:
        return sum((l.amount for l in self.lines if l.side == Side.CREDIT), Decimal("0"))

    @property
    def amount(self) -> Decimal:
        """Voucher amount as shown in listings (the debit total)."""
        return self.total_debit


@dataclass(frozen=True)
class BankRecord:
    """Manually entered bank statement line used for reconciliation."""

    id: str
    date: date
    description: str
    amount: Decimal
    direction: Direction
    matched: bool
    matched_voucher_id: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class AccountingPeriod:
    """Monthly accounting period (``YYYY-MM``) that can be closed."""

    id: str
    period: str
    status: PeriodStatus
    closed_at: Optional[datetime]
    closed_by: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class PurchaseOrder:
    id: str
    order_no: str
    date: date
    supplier: str
    items: str
    amount: Decimal
    status: PurchaseOrderStatus
    created_at: datetime


@dataclass(frozen=True)
class SalesInvoice:
    id: str
    invoice_no: str
    date: date
    customer: str
    items: str
    amount: Decimal
    status: SalesInvoiceStatus
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Employee expense reimbursement claim."""

    id: str
    date: date
    employee: str
    category: str
    description: str
    amount: Decimal
    status: ExpenseStatus
    created_at: datetime


@dataclass(frozen=True)
class TaxRecord:
    id: str
    period: str
    type: str
    taxable_amount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    status: TaxStatus
    created_at: datetime


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    contact: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Supplier:
    id: str
    name: str
    contact: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    position: Optional[str]
    department: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    salary: Optional[Decimal]
    join_date: Optional[date]
    created_at: datetime


# Result records


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking a set of entry lines.

    ``difference`` is ``total_debit - total_credit``; it is zero for a
    balanced set and may also be zero for an unbalanced one (all-zero
    lines, or fewer than two lines).
    """

    balanced: bool
    total_debit: Decimal
    total_credit: Decimal
    difference: Decimal
    reason: Optional[str] = None


@dataclass(frozen=True)
class LedgerRow:
    """One row of a general ledger view for a single account."""

    date: date
    voucher_id: str
    voucher_no: str
    description: str
    debit: Decimal
    credit: Decimal
    running_balance: Decimal


@dataclass(frozen=True)
class BatchPostResult:
    posted: tuple[str, ...]
    already_posted: tuple[str, ...]

    @property
    def total(self) -> int:
        return len(self.posted) + len(self.already_posted)


@dataclass(frozen=True)
class BalanceIssue:
    voucher_id: str
    voucher_no: str
    date: date
    description: str
    total_debit: Decimal
    total_credit: Decimal
    difference: Decimal


@dataclass(frozen=True)
class InternalCheckResult:
    total_vouchers: int
    balanced_vouchers: int
    unbalanced_vouchers: int
    issues: tuple[BalanceIssue, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ReconciliationSummary:
    matched_count: int
    unmatched_bank_count: int
    unmatched_book_count: int
    bank_total: Decimal
    book_total: Decimal
    difference: Decimal


@dataclass(frozen=True)
class PeriodCheck:
    period: str
    pending_vouchers: int
    unmatched_bank_records: int
    pending_tax_records: int

    @property
    def can_close(self) -> bool:
        return (
            self.pending_vouchers == 0
            and self.unmatched_bank_records == 0
            and self.pending_tax_records == 0
        )


@dataclass(frozen=True)
class TrialBalanceRow:
    account_id: str
    code: str
    name: str
    type: AccountType
    opening_balance: Decimal
    debit: Decimal
    credit: Decimal
    closing_balance: Decimal


@dataclass(frozen=True)
class TrialBalance:
    rows: tuple[TrialBalanceRow, ...]
    total_debit: Decimal
    total_credit: Decimal

    @property
    def balanced(self) -> bool:
        return self.total_debit == self.total_credit


@dataclass(frozen=True)
class BookRecord:
    """Posted voucher seen from the bank side of reconciliation."""

    voucher_id: str
    voucher_no: str
    date: date
    description: str
    amount: Decimal
    direction: Direction
    matched: bool
