"""Database factory functions for creating database instances."""

import os
from pathlib import Path
from typing import Optional

from ledgerbook.database.sqlalchemy_db import SQLAlchemyDatabase


def resolve_database_url(database_path: Optional[str] = None) -> str:
    """Resolve the SQLite URL for a database path.

    Args:
        database_path: Path to SQLite database file. If None, checks LEDGERBOOK_DB_PATH
            environment variable, then defaults to ~/.ledgerbook/ledgerbook.db

    Returns:
        SQLAlchemy database URL
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("LEDGERBOOK_DB_PATH")

    if database_path is None:
        # Default to ~/.ledgerbook/ledgerbook.db
        home = Path.home()
        db_dir = home / ".ledgerbook"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "ledgerbook.db")

    return f"sqlite:///{database_path}"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file (see resolve_database_url)

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    return SQLAlchemyDatabase(resolve_database_url(database_path))
