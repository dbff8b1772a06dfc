"""Request and response schemas (pydantic).

Stored records are returned with snake_case keys, as rows of their table.
Computed reports (ledger rows, checks, summaries) use camelCase keys.
Request bodies accept either spelling.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from ledgerbook.domain.entities import (
    AccountType,
    Direction,
    PeriodStatus,
    Side,
    VoucherStatus,
)

# Amounts are Decimal internally and plain JSON numbers on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class ReportModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, from_attributes=True, populate_by_name=True)


# Generic responses


class CreatedResponse(BaseModel):
    id: str
    message: str


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"


# Accounts


class AccountCreate(RequestModel):
    """Schema for creating an account."""

    id: Optional[str] = None
    code: str
    name: str
    type: str
    balance: Decimal = Decimal("0")


class AccountUpdate(RequestModel):
    code: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    balance: Optional[Decimal] = None


class AccountResponse(RecordModel):
    id: str
    code: str
    name: str
    type: AccountType
    balance: Money
    created_at: datetime


# Vouchers


class EntryLineIn(RequestModel):
    """One debit or credit leg; ``type`` is accepted for ``side``."""

    account: str
    side: str = Field(validation_alias=AliasChoices("side", "type"))
    amount: Decimal
    memo: Optional[str] = ""


class VoucherCreate(RequestModel):
    """Schema for creating a voucher.

    The voucher amount and status are derived; clients sending them are
    ignored.
    """

    id: Optional[str] = None
    voucher_no: str
    date: date
    description: str = ""
    lines: list[EntryLineIn]


class StatusUpdate(RequestModel):
    status: str


class BatchPostRequest(RequestModel):
    ids: list[str]


class BatchPostResponse(ReportModel):
    message: str
    posted: list[str]
    already_posted: list[str]


class EntryLineResponse(RecordModel):
    account: str
    side: Side
    amount: Money
    memo: str


class VoucherResponse(RecordModel):
    id: str
    voucher_no: str
    date: date
    description: str
    amount: Money
    total_debit: Money
    total_credit: Money
    status: VoucherStatus
    lines: list[EntryLineResponse]
    created_at: datetime


# Ledger


class LedgerRowResponse(ReportModel):
    date: date
    voucher_id: str
    voucher_no: str = Field(alias="voucherNumber")
    description: str
    debit: Money
    credit: Money
    running_balance: Money


class TrialBalanceRowResponse(ReportModel):
    account_id: str
    code: str
    name: str
    type: AccountType
    opening_balance: Money
    debit: Money
    credit: Money
    closing_balance: Money


class TrialBalanceResponse(ReportModel):
    rows: list[TrialBalanceRowResponse]
    total_debit: Money
    total_credit: Money
    balanced: bool


# Reconciliation


class BankRecordCreate(RequestModel):
    id: Optional[str] = None
    date: date
    description: str
    amount: Decimal
    direction: str = Field(validation_alias=AliasChoices("type", "direction"))


class MatchUpdate(RequestModel):
    matched: bool
    matched_voucher_id: Optional[str] = None


class BankRecordResponse(RecordModel):
    id: str
    date: date
    description: str
    amount: Money
    direction: Direction = Field(alias="type")
    matched: bool
    matched_voucher_id: Optional[str]
    created_at: datetime


class BalanceIssueResponse(ReportModel):
    voucher_id: str
    voucher_no: str = Field(alias="voucherNumber")
    date: date
    description: str
    total_debit: Money
    total_credit: Money
    difference: Money


class InternalCheckResponse(ReportModel):
    total_vouchers: int
    balanced_vouchers: int
    unbalanced_vouchers: int
    issues: list[BalanceIssueResponse]


class ReconciliationSummaryResponse(ReportModel):
    matched_count: int
    unmatched_bank_count: int
    unmatched_book_count: int
    bank_total: Money
    book_total: Money
    difference: Money


# Periods


class PeriodCreate(RequestModel):
    period: str


class PeriodClose(RequestModel):
    closed_by: Optional[str] = None


class PeriodResponse(RecordModel):
    id: str
    period: str
    status: PeriodStatus
    closed_at: Optional[datetime]
    closed_by: Optional[str]
    created_at: datetime


class PeriodCheckResponse(ReportModel):
    period: str
    pending_vouchers: int
    unmatched_bank_records: int
    pending_tax_records: int
    can_close: bool


# Business documents


class PurchaseOrderCreate(RequestModel):
    id: Optional[str] = None
    order_no: str
    date: date
    supplier: str
    items: str = ""
    amount: Decimal


class SalesInvoiceCreate(RequestModel):
    id: Optional[str] = None
    invoice_no: str
    date: date
    customer: str
    items: str = ""
    amount: Decimal


class ExpenseCreate(RequestModel):
    id: Optional[str] = None
    date: date
    employee: str
    category: str = ""
    description: str = ""
    amount: Decimal


class TaxRecordCreate(RequestModel):
    id: Optional[str] = None
    period: str
    type: str
    taxable_amount: Decimal
    tax_rate: Optional[Decimal] = None


class PurchaseOrderResponse(RecordModel):
    id: str
    order_no: str
    date: date
    supplier: str
    items: str
    amount: Money
    status: str
    created_at: datetime


class SalesInvoiceResponse(RecordModel):
    id: str
    invoice_no: str
    date: date
    customer: str
    items: str
    amount: Money
    status: str
    created_at: datetime


class ExpenseResponse(RecordModel):
    id: str
    date: date
    employee: str
    category: str
    description: str
    amount: Money
    status: str
    created_at: datetime


class TaxRecordResponse(RecordModel):
    id: str
    period: str
    type: str
    taxable_amount: Money
    tax_rate: Money
    tax_amount: Money
    status: str
    created_at: datetime


# Directory


class PartyFields(RequestModel):
    """Customer or supplier fields; all optional so PUT can be partial."""

    id: Optional[str] = None
    name: Optional[str] = None
    contact: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    balance: Optional[Decimal] = None


class EmployeeFields(RequestModel):
    id: Optional[str] = None
    name: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    salary: Optional[Decimal] = None
    join_date: Optional[date] = None


class PartyResponse(RecordModel):
    id: str
    name: str
    contact: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    address: Optional[str]
    balance: Money
    created_at: datetime


class EmployeeResponse(RecordModel):
    id: str
    name: str
    position: Optional[str]
    department: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    salary: Optional[Money]
    join_date: Optional[date]
    created_at: datetime
