"""Domain layer for ledgerbook application.

Services are resolved lazily so that ``ledgerbook.database`` can import
``ledgerbook.domain.entities`` without pulling the services (which import
the database layer) back in.
"""

import importlib

_SERVICES = {
    "AccountService": "ledgerbook.domain.account",
    "VoucherService": "ledgerbook.domain.voucher",
    "LedgerService": "ledgerbook.domain.ledger",
    "ReconciliationService": "ledgerbook.domain.reconciliation",
    "PeriodService": "ledgerbook.domain.period",
    "DocumentService": "ledgerbook.domain.documents",
    "TaxService": "ledgerbook.domain.tax",
    "DirectoryService": "ledgerbook.domain.directory",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
