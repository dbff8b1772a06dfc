"""FastAPI application factory.

Run with ``ledgerbook serve`` or ``python -m ledgerbook.api``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request

from ledgerbook.api.errors import register_error_handlers
from ledgerbook.api.routes import (
    accounts,
    directory,
    documents,
    health,
    ledger,
    periods,
    reconciliation,
    vouchers,
)
from ledgerbook.database.factories import resolve_database_url
from ledgerbook.database.models import create_session_factory
from ledgerbook.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(database_path: Optional[str] = None, configure_logging: bool = True) -> FastAPI:
    """Build the REST application.

    Args:
        database_path: SQLite file; defaults as for the CLI (LEDGERBOOK_DB_PATH,
            then ~/.ledgerbook/ledgerbook.db)
        configure_logging: Install the ledgerbook log handler from
            LEDGERBOOK_LOG_LEVEL

    Returns:
        FastAPI application
    """
    if configure_logging:
        setup_logging()

    app = FastAPI(
        title="Ledgerbook API",
        description="Double-entry bookkeeping for small businesses",
        version="0.1.0",
    )
    app.state.database_url = resolve_database_url(database_path)
    app.state.session_factory = create_session_factory(app.state.database_url)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.debug("%s %s", request.method, request.url.path)
        response = await call_next(request)
        logger.debug("%s %s -> %d", request.method, request.url.path, response.status_code)
        return response

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(accounts.router)
    app.include_router(vouchers.router)
    app.include_router(ledger.router)
    app.include_router(reconciliation.router)
    app.include_router(periods.router)
    app.include_router(documents.router)
    app.include_router(directory.router)

    logger.info("API ready, database %s", app.state.database_url)
    return app
