"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the normalized voucher line
table and string-typed enum columns never leak out of the database package.
"""

from decimal import Decimal

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Account as ORMAccount,
    Voucher as ORMVoucher,
    VoucherLine as ORMVoucherLine,
    BankRecord as ORMBankRecord,
    AccountingPeriod as ORMAccountingPeriod,
    PurchaseOrder as ORMPurchaseOrder,
    SalesInvoice as ORMSalesInvoice,
    Expense as ORMExpense,
    TaxRecord as ORMTaxRecord,
    Customer as ORMCustomer,
    Supplier as ORMSupplier,
    Employee as ORMEmployee,
)


def _decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return value if isinstance(value, Decimal) else Decimal(str(value))


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        code=orm_account.code,
        name=orm_account.name,
        type=domain.AccountType(orm_account.type),
        balance=_decimal(orm_account.balance),
        created_at=orm_account.created_at,
    )


def line_to_domain(orm_line: ORMVoucherLine) -> domain.EntryLine:
    """Convert SQLAlchemy VoucherLine model to domain EntryLine."""
    return domain.EntryLine(
        account=orm_line.account_code,
        amount=_decimal(orm_line.amount),
        side=domain.Side(orm_line.side),
        memo=orm_line.memo or "",
    )


def voucher_to_domain(orm_voucher: ORMVoucher) -> domain.Voucher:
    """Convert SQLAlchemy Voucher model (with its lines) to domain Voucher."""
    return domain.Voucher(
        id=orm_voucher.id,
        voucher_no=orm_voucher.voucher_no,
        date=orm_voucher.date,
        description=orm_voucher.description or "",
        lines=tuple(line_to_domain(line) for line in orm_voucher.lines),
        status=domain.VoucherStatus(orm_voucher.status),
        created_at=orm_voucher.created_at,
    )


def bank_record_to_domain(orm_record: ORMBankRecord) -> domain.BankRecord:
    """Convert SQLAlchemy BankRecord model to domain BankRecord."""
    return domain.BankRecord(
        id=orm_record.id,
        date=orm_record.date,
        description=orm_record.description or "",
        amount=_decimal(orm_record.amount),
        direction=domain.Direction(orm_record.type),
        matched=bool(orm_record.matched),
        matched_voucher_id=orm_record.matched_voucher_id,
        created_at=orm_record.created_at,
    )


def period_to_domain(orm_period: ORMAccountingPeriod) -> domain.AccountingPeriod:
    return domain.AccountingPeriod(
        id=orm_period.id,
        period=orm_period.period,
        status=domain.PeriodStatus(orm_period.status),
        closed_at=orm_period.closed_at,
        closed_by=orm_period.closed_by,
        created_at=orm_period.created_at,
    )


def purchase_order_to_domain(orm_order: ORMPurchaseOrder) -> domain.PurchaseOrder:
    return domain.PurchaseOrder(
        id=orm_order.id,
        order_no=orm_order.order_no,
        date=orm_order.date,
        supplier=orm_order.supplier,
        items=orm_order.items or "",
        amount=_decimal(orm_order.amount),
        status=domain.PurchaseOrderStatus(orm_order.status),
        created_at=orm_order.created_at,
    )


def sales_invoice_to_domain(orm_invoice: ORMSalesInvoice) -> domain.SalesInvoice:
    return domain.SalesInvoice(
        id=orm_invoice.id,
        invoice_no=orm_invoice.invoice_no,
        date=orm_invoice.date,
        customer=orm_invoice.customer,
        items=orm_invoice.items or "",
        amount=_decimal(orm_invoice.amount),
        status=domain.SalesInvoiceStatus(orm_invoice.status),
        created_at=orm_invoice.created_at,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    return domain.Expense(
        id=orm_expense.id,
        date=orm_expense.date,
        employee=orm_expense.employee,
        category=orm_expense.category or "",
        description=orm_expense.description or "",
        amount=_decimal(orm_expense.amount),
        status=domain.ExpenseStatus(orm_expense.status),
        created_at=orm_expense.created_at,
    )


def tax_record_to_domain(orm_record: ORMTaxRecord) -> domain.TaxRecord:
    return domain.TaxRecord(
        id=orm_record.id,
        period=orm_record.period,
        type=orm_record.type,
        taxable_amount=_decimal(orm_record.taxable_amount),
        tax_rate=_decimal(orm_record.tax_rate),
        tax_amount=_decimal(orm_record.tax_amount),
        status=domain.TaxStatus(orm_record.status),
        created_at=orm_record.created_at,
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    return domain.Customer(
        id=orm_customer.id,
        name=orm_customer.name,
        contact=orm_customer.contact,
        phone=orm_customer.phone,
        email=orm_customer.email,
        address=orm_customer.address,
        balance=_decimal(orm_customer.balance),
        created_at=orm_customer.created_at,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    return domain.Supplier(
        id=orm_supplier.id,
        name=orm_supplier.name,
        contact=orm_supplier.contact,
        phone=orm_supplier.phone,
        email=orm_supplier.email,
        address=orm_supplier.address,
        balance=_decimal(orm_supplier.balance),
        created_at=orm_supplier.created_at,
    )


def employee_to_domain(orm_employee: ORMEmployee) -> domain.Employee:
    return domain.Employee(
        id=orm_employee.id,
        name=orm_employee.name,
        position=orm_employee.position,
        department=orm_employee.department,
        phone=orm_employee.phone,
        email=orm_employee.email,
        salary=orm_employee.salary,
        join_date=orm_employee.join_date,
        created_at=orm_employee.created_at,
    )
