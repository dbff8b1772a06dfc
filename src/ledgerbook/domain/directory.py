"""Directory of customers, suppliers and employees."""

import logging
from typing import Any, Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.errors import NotFoundError, ValidationError, not_found
from ledgerbook.utils.amount_parser import to_amount
from ledgerbook.utils.date_parser import coerce_date

logger = logging.getLogger(__name__)

# kind -> (editable fields, display name)
PARTY_FIELDS: dict[str, tuple[tuple[str, ...], str]] = {
    "customer": (("name", "contact", "phone", "email", "address", "balance"), "Customer"),
    "supplier": (("name", "contact", "phone", "email", "address", "balance"), "Supplier"),
    "employee": (
        ("name", "position", "department", "phone", "email", "salary", "join_date"),
        "Employee",
    ),
}


class DirectoryService:
    """CRUD for the business directory.

    ``kind`` is one of customer, supplier or employee throughout.
    """

    def __init__(self, db: Database):
        self.db = db

    def _clean(self, kind: str, fields: dict[str, Any], creating: bool) -> dict[str, Any]:
        if kind not in PARTY_FIELDS:
            raise ValueError(f"Unknown directory kind '{kind}'")
        allowed, label = PARTY_FIELDS[kind]
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise ValidationError(f"Unknown {label.lower()} field(s): {', '.join(unknown)}")

        cleaned = {}
        for name, value in fields.items():
            if name == "name":
                value = (value or "").strip()
                if not value:
                    raise ValidationError(f"{label} name is required")
            elif name == "balance":
                value = to_amount(value if value is not None else 0, "balance", allow_negative=True)
            elif name == "salary" and value is not None:
                value = to_amount(value, "salary")
            elif name == "join_date" and value is not None:
                try:
                    value = coerce_date(value)
                except ValueError as e:
                    raise ValidationError(str(e)) from None
            cleaned[name] = value

        if creating and "name" not in cleaned:
            raise ValidationError(f"{label} name is required")
        return cleaned

    def create_entry(self, kind: str, fields: dict[str, Any], party_id: Optional[str] = None):
        """Create a directory entry.

        Raises:
            ValidationError: If the name is missing or a field is invalid
        """
        cleaned = self._clean(kind, fields, creating=True)
        new_id = self.db.create_party(kind, cleaned, party_id=party_id)
        logger.info("Created %s %s (%s)", kind, cleaned["name"], new_id)
        return self.db.get_party(kind, new_id)

    def get_entry(self, kind: str, party_id: str):
        return self.db.get_party(kind, party_id)

    def list_entries(self, kind: str) -> list:
        """List entries of a kind, newest first."""
        return self.db.list_parties(kind)

    def update_entry(self, kind: str, party_id: str, fields: dict[str, Any]):
        """Update the given fields of an entry.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If a field is invalid
        """
        cleaned = self._clean(kind, fields, creating=False)
        if self.db.get_party(kind, party_id) is None:
            raise NotFoundError(not_found(PARTY_FIELDS[kind][1], party_id))
        self.db.update_party(kind, party_id, cleaned)
        logger.info("Updated %s %s", kind, party_id)
        return self.db.get_party(kind, party_id)

    def delete_entry(self, kind: str, party_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        self.db.delete_party(kind, party_id)
        logger.info("Deleted %s %s", kind, party_id)
