"""REST API for ledgerbook."""

from ledgerbook.api.app import create_app

__all__ = ["create_app"]
