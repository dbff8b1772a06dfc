"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Any
from datetime import date, datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Account,
    AccountingPeriod,
    BankRecord,
    Customer,
    Direction,
    Employee,
    EntryLine,
    Expense,
    PurchaseOrder,
    SalesInvoice,
    Supplier,
    TaxRecord,
    Voucher,
)


class Database(ABC):
    """Abstract database interface for ledgerbook.

    Every write method is a single storage transaction: it either commits
    completely or leaves no trace. Uniqueness violations surface as
    ``DuplicateKeyError`` subclasses and other storage failures as
    ``StorageError``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        code: str,
        name: str,
        type: str,
        balance: Decimal,
        account_id: Optional[str] = None,
    ) -> str:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: str) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_code(self, code: str) -> Optional[Account]:
        """Get account by its unique code."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by code."""
        pass

    @abstractmethod
    def update_account(
        self,
        account_id: str,
        code: Optional[str] = None,
        name: Optional[str] = None,
        type: Optional[str] = None,
        balance: Optional[Decimal] = None,
    ) -> None:
        """Update the given account fields; None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_account(self, account_id: str) -> None:
        """Delete an account."""
        pass

    @abstractmethod
    def count_vouchers_referencing(self, account_code: str) -> int:
        """Count vouchers with at least one line on the given account code."""
        pass

    # Voucher operations
    @abstractmethod
    def create_voucher(
        self,
        voucher_no: str,
        date: date,
        description: str,
        lines: Sequence[EntryLine],
        status: str = "pending",
        voucher_id: Optional[str] = None,
    ) -> str:
        """Create a voucher and its lines in one transaction. Returns voucher ID."""
        pass

    @abstractmethod
    def get_voucher(self, voucher_id: str) -> Optional[Voucher]:
        """Get voucher by ID."""
        pass

    @abstractmethod
    def get_voucher_by_number(self, voucher_no: str) -> Optional[Voucher]:
        """Get voucher by voucher number."""
        pass

    @abstractmethod
    def list_vouchers(
        self,
        status: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        ascending: bool = False,
    ) -> list[Voucher]:
        """List vouchers with optional filters.

        Args:
            status: Optional status filter
            start_date: Optional inclusive start date
            end_date: Optional inclusive end date
            ascending: Oldest first (date, then voucher number) when True,
                newest first otherwise
        """
        pass

    @abstractmethod
    def update_vouchers_status(self, voucher_ids: Sequence[str], status: str) -> None:
        """Set the status of several vouchers in a single transaction."""
        pass

    # Bank record operations
    @abstractmethod
    def create_bank_record(
        self,
        date: date,
        description: str,
        amount: Decimal,
        direction: Direction,
        record_id: Optional[str] = None,
    ) -> str:
        """Create an unmatched bank record. Returns record ID."""
        pass

    @abstractmethod
    def get_bank_record(self, record_id: str) -> Optional[BankRecord]:
        """Get bank record by ID."""
        pass

    @abstractmethod
    def list_bank_records(
        self,
        matched: Optional[bool] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[BankRecord]:
        """List bank records, newest first."""
        pass

    @abstractmethod
    def set_bank_record_match(self, record_id: str, voucher_id: Optional[str]) -> None:
        """Match a bank record to a voucher, or clear the match when voucher_id is None.

        Any other bank record currently matched to the same voucher is
        unmatched in the same transaction.
        """
        pass

    @abstractmethod
    def delete_bank_record(self, record_id: str) -> None:
        """Delete a bank record."""
        pass

    # Accounting period operations
    @abstractmethod
    def create_period(self, period: str) -> str:
        """Create an open accounting period. Returns period ID."""
        pass

    @abstractmethod
    def get_period(self, period: str) -> Optional[AccountingPeriod]:
        """Get accounting period by its ``YYYY-MM`` key."""
        pass

    @abstractmethod
    def list_periods(self, status: Optional[str] = None) -> list[AccountingPeriod]:
        """List accounting periods ordered by period."""
        pass

    @abstractmethod
    def update_period_status(
        self,
        period: str,
        status: str,
        closed_at: Optional[datetime] = None,
        closed_by: Optional[str] = None,
    ) -> None:
        """Set period status together with its closing metadata."""
        pass

    # Business document operations
    @abstractmethod
    def create_purchase_order(
        self,
        order_no: str,
        date: date,
        supplier: str,
        items: str,
        amount: Decimal,
        status: str,
        order_id: Optional[str] = None,
    ) -> str:
        """Create a purchase order. Returns order ID."""
        pass

    @abstractmethod
    def get_purchase_order(self, order_id: str) -> Optional[PurchaseOrder]:
        pass

    @abstractmethod
    def get_purchase_order_by_number(self, order_no: str) -> Optional[PurchaseOrder]:
        """Get purchase order by order number."""
        pass

    @abstractmethod
    def list_purchase_orders(self) -> list[PurchaseOrder]:
        pass

    @abstractmethod
    def create_sales_invoice(
        self,
        invoice_no: str,
        date: date,
        customer: str,
        items: str,
        amount: Decimal,
        status: str,
        invoice_id: Optional[str] = None,
    ) -> str:
        """Create a sales invoice. Returns invoice ID."""
        pass

    @abstractmethod
    def get_sales_invoice(self, invoice_id: str) -> Optional[SalesInvoice]:
        pass

    @abstractmethod
    def get_sales_invoice_by_number(self, invoice_no: str) -> Optional[SalesInvoice]:
        """Get sales invoice by invoice number."""
        pass

    @abstractmethod
    def list_sales_invoices(self) -> list[SalesInvoice]:
        pass

    @abstractmethod
    def create_expense(
        self,
        date: date,
        employee: str,
        category: str,
        description: str,
        amount: Decimal,
        status: str,
        expense_id: Optional[str] = None,
    ) -> str:
        """Create an expense claim. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: str) -> Optional[Expense]:
        pass

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        pass

    @abstractmethod
    def create_tax_record(
        self,
        period: str,
        type: str,
        taxable_amount: Decimal,
        tax_rate: Decimal,
        tax_amount: Decimal,
        status: str,
        record_id: Optional[str] = None,
    ) -> str:
        """Create a tax record. Returns record ID."""
        pass

    @abstractmethod
    def get_tax_record(self, record_id: str) -> Optional[TaxRecord]:
        pass

    @abstractmethod
    def list_tax_records(self, period: Optional[str] = None) -> list[TaxRecord]:
        pass

    @abstractmethod
    def update_document_status(self, kind: str, document_id: str, status: str) -> None:
        """Set the status of a purchase order, sales invoice, expense or tax record.

        Args:
            kind: One of "purchase_order", "sales_invoice", "expense", "tax_record"
            document_id: Document ID
            status: New status value
        """
        pass

    # Directory operations (customers, suppliers, employees)
    @abstractmethod
    def create_party(self, kind: str, fields: dict[str, Any], party_id: Optional[str] = None) -> str:
        """Create a customer, supplier or employee. Returns its ID."""
        pass

    @abstractmethod
    def get_party(self, kind: str, party_id: str) -> Optional[Customer | Supplier | Employee]:
        pass

    @abstractmethod
    def list_parties(self, kind: str) -> list[Customer | Supplier | Employee]:
        """List parties of one kind, newest first."""
        pass

    @abstractmethod
    def update_party(self, kind: str, party_id: str, fields: dict[str, Any]) -> None:
        pass

    @abstractmethod
    def delete_party(self, kind: str, party_id: str) -> None:
        pass
