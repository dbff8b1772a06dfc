"""FastAPI dependencies: one database session and service set per request."""

from typing import Iterator

from fastapi import Depends, Request

from ledgerbook.database.base import Database
from ledgerbook.database.sqlalchemy_db import SQLAlchemyDatabase
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.directory import DirectoryService
from ledgerbook.domain.documents import DocumentService
from ledgerbook.domain.ledger import LedgerService
from ledgerbook.domain.period import PeriodService
from ledgerbook.domain.reconciliation import ReconciliationService
from ledgerbook.domain.tax import TaxService
from ledgerbook.domain.voucher import VoucherService


def get_db(request: Request) -> Iterator[Database]:
    """Open a database session for the request and close it afterwards."""
    state = request.app.state
    db = SQLAlchemyDatabase(state.database_url, session_factory=state.session_factory)
    try:
        yield db
    finally:
        db.disconnect()


def get_account_service(db: Database = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_voucher_service(db: Database = Depends(get_db)) -> VoucherService:
    return VoucherService(db)


def get_ledger_service(db: Database = Depends(get_db)) -> LedgerService:
    return LedgerService(db)


def get_reconciliation_service(db: Database = Depends(get_db)) -> ReconciliationService:
    return ReconciliationService(db)


def get_period_service(db: Database = Depends(get_db)) -> PeriodService:
    return PeriodService(db)


def get_document_service(db: Database = Depends(get_db)) -> DocumentService:
    return DocumentService(db)


def get_tax_service(db: Database = Depends(get_db)) -> TaxService:
    return TaxService(db)


def get_directory_service(db: Database = Depends(get_db)) -> DirectoryService:
    return DirectoryService(db)
