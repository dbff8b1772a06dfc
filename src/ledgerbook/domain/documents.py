"""Business documents: purchase orders, sales invoices and expense claims."""

import logging
from datetime import date
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Expense, PurchaseOrder, SalesInvoice
from ledgerbook.domain.errors import DuplicateKeyError, NotFoundError, ValidationError, not_found
from ledgerbook.domain.workflow import (
    EXPENSE_WORKFLOW,
    PURCHASE_ORDER_WORKFLOW,
    SALES_INVOICE_WORKFLOW,
    Workflow,
)
from ledgerbook.utils.amount_parser import to_amount

logger = logging.getLogger(__name__)

# kind -> (workflow, display name)
DOCUMENT_KINDS: dict[str, tuple[Workflow, str]] = {
    "purchase_order": (PURCHASE_ORDER_WORKFLOW, "Purchase order"),
    "sales_invoice": (SALES_INVOICE_WORKFLOW, "Sales invoice"),
    "expense": (EXPENSE_WORKFLOW, "Expense"),
}


def _required(value: Optional[str], label: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{label} is required")
    return value


class DocumentService:
    """Service for business documents that follow a status workflow."""

    def __init__(self, db: Database):
        """Initialize document service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_purchase_order(
        self,
        order_no: str,
        date: date,
        supplier: str,
        amount,
        items: str = "",
        order_id: Optional[str] = None,
    ) -> PurchaseOrder:
        """Create a purchase order in the pending state.

        Raises:
            ValidationError: If a required field is missing or the amount is invalid
            DuplicateKeyError: If the order number is already used
        """
        order_no = _required(order_no, "Order number")
        supplier = _required(supplier, "Supplier")
        if date is None:
            raise ValidationError("Order date is required")
        amount = to_amount(amount)
        if self.db.get_purchase_order_by_number(order_no) is not None:
            raise DuplicateKeyError("order_no", order_no, f"Purchase order '{order_no}' already exists")

        new_id = self.db.create_purchase_order(
            order_no=order_no,
            date=date,
            supplier=supplier,
            items=items or "",
            amount=amount,
            status=PURCHASE_ORDER_WORKFLOW.initial.value,
            order_id=order_id,
        )
        logger.info("Created purchase order %s for %s", order_no, supplier)
        return self.db.get_purchase_order(new_id)

    def create_sales_invoice(
        self,
        invoice_no: str,
        date: date,
        customer: str,
        amount,
        items: str = "",
        invoice_id: Optional[str] = None,
    ) -> SalesInvoice:
        """Create a sales invoice in the draft state.

        Raises:
            ValidationError: If a required field is missing or the amount is invalid
            DuplicateKeyError: If the invoice number is already used
        """
        invoice_no = _required(invoice_no, "Invoice number")
        customer = _required(customer, "Customer")
        if date is None:
            raise ValidationError("Invoice date is required")
        amount = to_amount(amount)
        if self.db.get_sales_invoice_by_number(invoice_no) is not None:
            raise DuplicateKeyError(
                "invoice_no", invoice_no, f"Sales invoice '{invoice_no}' already exists"
            )

        new_id = self.db.create_sales_invoice(
            invoice_no=invoice_no,
            date=date,
            customer=customer,
            items=items or "",
            amount=amount,
            status=SALES_INVOICE_WORKFLOW.initial.value,
            invoice_id=invoice_id,
        )
        logger.info("Created sales invoice %s for %s", invoice_no, customer)
        return self.db.get_sales_invoice(new_id)

    def create_expense(
        self,
        date: date,
        employee: str,
        amount,
        category: str = "",
        description: str = "",
        expense_id: Optional[str] = None,
    ) -> Expense:
        """Create an expense claim in the pending state."""
        employee = _required(employee, "Employee")
        if date is None:
            raise ValidationError("Expense date is required")
        amount = to_amount(amount)

        new_id = self.db.create_expense(
            date=date,
            employee=employee,
            category=category or "",
            description=description or "",
            amount=amount,
            status=EXPENSE_WORKFLOW.initial.value,
            expense_id=expense_id,
        )
        logger.info("Created expense claim %s for %s", new_id, employee)
        return self.db.get_expense(new_id)

    def list_purchase_orders(self) -> list[PurchaseOrder]:
        return self.db.list_purchase_orders()

    def list_sales_invoices(self) -> list[SalesInvoice]:
        return self.db.list_sales_invoices()

    def list_expenses(self) -> list[Expense]:
        return self.db.list_expenses()

    def get_document(self, kind: str, document_id: str):
        """Get a document of the given kind, or None."""
        getters = {
            "purchase_order": self.db.get_purchase_order,
            "sales_invoice": self.db.get_sales_invoice,
            "expense": self.db.get_expense,
        }
        if kind not in getters:
            raise ValueError(f"Unknown document kind '{kind}'")
        return getters[kind](document_id)

    def update_status(self, kind: str, document_id: str, status: str):
        """Move a document along its workflow.

        Args:
            kind: purchase_order, sales_invoice or expense
            document_id: Document ID
            status: Requested status

        Returns:
            The document after the update

        Raises:
            NotFoundError: If the document does not exist
            ValidationError: If the status is unknown for this kind
            StatusTransitionError: If the workflow does not allow the change
        """
        workflow, label = DOCUMENT_KINDS[kind]
        document = self.get_document(kind, document_id)
        if document is None:
            raise NotFoundError(not_found(label, document_id))
        if workflow.advance(document.status, status):
            self.db.update_document_status(kind, document_id, workflow.coerce(status).value)
            logger.info("%s %s moved to %s", label, document_id, workflow.coerce(status).value)
        return self.get_document(kind, document_id)
