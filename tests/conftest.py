"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.directory import DirectoryService
from ledgerbook.domain.documents import DocumentService
from ledgerbook.domain.entities import EntryLine, Side
from ledgerbook.domain.ledger import LedgerService
from ledgerbook.domain.period import PeriodService
from ledgerbook.domain.reconciliation import ReconciliationService
from ledgerbook.domain.tax import TaxService
from ledgerbook.domain.voucher import VoucherService

# code, name, type
SAMPLE_ACCOUNTS = [
    ("1001", "Cash", "asset"),
    ("1002", "Bank Deposits", "asset"),
    ("1122", "Accounts Receivable", "asset"),
    ("2202", "Accounts Payable", "liability"),
    ("4001", "Paid-in Capital", "equity"),
    ("6001", "Sales Revenue", "income"),
    ("6602", "Administrative Expenses", "expense"),
]


def debit(account: str, amount) -> EntryLine:
    return EntryLine(account=account, amount=Decimal(str(amount)), side=Side.DEBIT)


def credit(account: str, amount) -> EntryLine:
    return EntryLine(account=account, amount=Decimal(str(amount)), side=Side.CREDIT)


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def voucher_service(temp_db):
    """Create a VoucherService with a temporary database."""
    return VoucherService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    return LedgerService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    return ReconciliationService(temp_db)


@pytest.fixture
def period_service(temp_db):
    return PeriodService(temp_db)


@pytest.fixture
def document_service(temp_db):
    return DocumentService(temp_db)


@pytest.fixture
def tax_service(temp_db):
    return TaxService(temp_db)


@pytest.fixture
def directory_service(temp_db):
    return DirectoryService(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create a small chart of accounts, keyed by code."""
    return {
        code: account_service.create_account(code=code, name=name, type=account_type)
        for code, name, account_type in SAMPLE_ACCOUNTS
    }


@pytest.fixture
def pending_voucher(voucher_service, sample_accounts):
    """A balanced voucher: debit 1001, credit 1002, 1000 each."""
    return voucher_service.create_voucher(
        voucher_no="V001",
        date=date(2024, 3, 5),
        lines=[debit("1001", 1000), credit("1002", 1000)],
        description="Cash withdrawn from bank",
    )


@pytest.fixture
def posted_voucher(voucher_service, pending_voucher):
    return voucher_service.post_voucher(pending_voucher.id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def api_client(temp_db, tmp_path):
    """FastAPI test client sharing the temporary database."""
    from fastapi.testclient import TestClient

    from ledgerbook.api.app import create_app
    from ledgerbook.api.dependencies import get_db

    app = create_app(database_path=str(tmp_path / "unused.db"), configure_logging=False)

    def override_get_db():
        yield temp_db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
