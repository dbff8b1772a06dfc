"""SQLAlchemy models for ledgerbook database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(UTC)


class Account(Base):
    """Chart of accounts entry."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True, default=new_id)
    code = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    balance = Column(Numeric(14, 2), default=0, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Voucher(Base):
    """Journal voucher header."""

    __tablename__ = "vouchers"

    id = Column(String, primary_key=True, default=new_id)
    voucher_no = Column(String, unique=True, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, default="", nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)

    # Relationships
    lines = relationship(
        "VoucherLine",
        back_populates="voucher",
        cascade="all, delete-orphan",
        order_by="VoucherLine.line_no",
    )


class VoucherLine(Base):
    """Debit or credit leg of a voucher, referencing an account by code."""

    __tablename__ = "voucher_lines"

    id = Column(Integer, primary_key=True)
    voucher_id = Column(String, ForeignKey("vouchers.id"), nullable=False)
    line_no = Column(Integer, nullable=False)
    account_code = Column(String, nullable=False, index=True)
    side = Column(String, nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    memo = Column(String, default="", nullable=False)

    # Relationships
    voucher = relationship("Voucher", back_populates="lines")


class BankRecord(Base):
    """Bank statement line entered for reconciliation."""

    __tablename__ = "bank_records"

    id = Column(String, primary_key=True, default=new_id)
    date = Column(Date, nullable=False)
    description = Column(String, default="", nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    type = Column(String, nullable=False)
    matched = Column(Boolean, default=False, nullable=False)
    matched_voucher_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)


class AccountingPeriod(Base):
    """Month-end closing state for a ``YYYY-MM`` period."""

    __tablename__ = "accounting_periods"

    id = Column(String, primary_key=True, default=new_id)
    period = Column(String, unique=True, nullable=False)
    status = Column(String, default="open", nullable=False)
    closed_at = Column(DateTime, nullable=True)
    closed_by = Column(String, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)


class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(String, primary_key=True, default=new_id)
    order_no = Column(String, unique=True, nullable=False)
    date = Column(Date, nullable=False)
    supplier = Column(String, nullable=False)
    items = Column(String, default="", nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class SalesInvoice(Base):
    __tablename__ = "sales_invoices"

    id = Column(String, primary_key=True, default=new_id)
    invoice_no = Column(String, unique=True, nullable=False)
    date = Column(Date, nullable=False)
    customer = Column(String, nullable=False)
    items = Column(String, default="", nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    status = Column(String, default="draft", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(String, primary_key=True, default=new_id)
    date = Column(Date, nullable=False)
    employee = Column(String, nullable=False)
    category = Column(String, default="", nullable=False)
    description = Column(String, default="", nullable=False)
    amount = Column(Numeric(14, 2), nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class TaxRecord(Base):
    __tablename__ = "tax_records"

    id = Column(String, primary_key=True, default=new_id)
    period = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    taxable_amount = Column(Numeric(14, 2), nullable=False)
    tax_rate = Column(Numeric(6, 2), nullable=False)
    tax_amount = Column(Numeric(14, 2), nullable=False)
    status = Column(String, default="pending", nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Customer(Base):
    __tablename__ = "customers"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    contact = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    balance = Column(Numeric(14, 2), default=0, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    contact = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(String, nullable=True)
    balance = Column(Numeric(14, 2), default=0, nullable=False)
    created_at = Column(DateTime, default=_now, nullable=False)


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    position = Column(String, nullable=True)
    department = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    salary = Column(Numeric(14, 2), nullable=True)
    join_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=_now, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # The API serves sync endpoints from a thread pool
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=False, connect_args=connect_args)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
