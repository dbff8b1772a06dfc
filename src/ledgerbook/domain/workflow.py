"""Status state machines for vouchers, business documents and tax records."""

import enum
from dataclasses import dataclass
from typing import Mapping

from ledgerbook.domain.entities import (
    ExpenseStatus,
    PeriodStatus,
    PurchaseOrderStatus,
    SalesInvoiceStatus,
    TaxStatus,
    VoucherStatus,
)
from ledgerbook.domain.errors import StatusTransitionError, ValidationError, invalid_transition


@dataclass(frozen=True)
class Workflow:
    """Allowed status transitions for one kind of record.

    Re-applying the current status is always allowed and reported as
    "no change"; anything not listed in ``transitions`` is rejected.
    """

    kind: str
    status_type: type[enum.Enum]
    initial: enum.Enum
    transitions: Mapping[enum.Enum, frozenset]

    def coerce(self, status: "str | enum.Enum") -> enum.Enum:
        """Convert a raw status value to this workflow's enum."""
        try:
            return self.status_type(status)
        except ValueError:
            allowed = ", ".join(s.value for s in self.status_type)
            raise ValidationError(
                f"Invalid {self.kind} status '{status}' (expected one of: {allowed})"
            ) from None

    def advance(self, current: enum.Enum, requested: "str | enum.Enum") -> bool:
        """Check a transition.

        Returns:
            True if the status changes, False if it is already ``requested``

        Raises:
            ValidationError: If ``requested`` is not a status of this workflow
            StatusTransitionError: If the transition is not allowed
        """
        target = self.coerce(requested)
        if target == current:
            return False
        if target not in self.transitions.get(current, frozenset()):
            raise StatusTransitionError(invalid_transition(self.kind, current.value, target.value))
        return True


VOUCHER_WORKFLOW = Workflow(
    kind="voucher",
    status_type=VoucherStatus,
    initial=VoucherStatus.PENDING,
    transitions={VoucherStatus.PENDING: frozenset({VoucherStatus.POSTED})},
)

PERIOD_WORKFLOW = Workflow(
    kind="period",
    status_type=PeriodStatus,
    initial=PeriodStatus.OPEN,
    transitions={
        PeriodStatus.OPEN: frozenset({PeriodStatus.CLOSED}),
        PeriodStatus.CLOSED: frozenset({PeriodStatus.OPEN}),
    },
)

PURCHASE_ORDER_WORKFLOW = Workflow(
    kind="purchase order",
    status_type=PurchaseOrderStatus,
    initial=PurchaseOrderStatus.PENDING,
    transitions={
        PurchaseOrderStatus.PENDING: frozenset({PurchaseOrderStatus.APPROVED}),
        PurchaseOrderStatus.APPROVED: frozenset({PurchaseOrderStatus.COMPLETED}),
    },
)

SALES_INVOICE_WORKFLOW = Workflow(
    kind="sales invoice",
    status_type=SalesInvoiceStatus,
    initial=SalesInvoiceStatus.DRAFT,
    transitions={
        SalesInvoiceStatus.DRAFT: frozenset({SalesInvoiceStatus.SENT}),
        SalesInvoiceStatus.SENT: frozenset({SalesInvoiceStatus.PAID}),
    },
)

EXPENSE_WORKFLOW = Workflow(
    kind="expense",
    status_type=ExpenseStatus,
    initial=ExpenseStatus.PENDING,
    transitions={
        ExpenseStatus.PENDING: frozenset({ExpenseStatus.APPROVED, ExpenseStatus.REJECTED}),
    },
)

TAX_WORKFLOW = Workflow(
    kind="tax record",
    status_type=TaxStatus,
    initial=TaxStatus.PENDING,
    transitions={
        TaxStatus.PENDING: frozenset({TaxStatus.DECLARED}),
        TaxStatus.DECLARED: frozenset({TaxStatus.PAID}),
    },
)
