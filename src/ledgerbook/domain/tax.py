"""Tax record domain service."""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import TaxRecord
from ledgerbook.domain.errors import NotFoundError, ValidationError, not_found
from ledgerbook.domain.period import period_key
from ledgerbook.domain.workflow import TAX_WORKFLOW
from ledgerbook.utils.amount_parser import CENT, to_amount

logger = logging.getLogger(__name__)

# Percent rates applied when a record is filed without an explicit rate
DEFAULT_TAX_RATES = {
    "vat": Decimal("13"),
    "corporate_income_tax": Decimal("25"),
    "individual_income_tax": Decimal("20"),
}


def compute_tax(taxable_amount: Decimal, tax_rate: Decimal) -> Decimal:
    """Return ``taxable_amount * tax_rate / 100`` rounded half-up to cents."""
    return (taxable_amount * tax_rate / Decimal("100")).quantize(CENT, rounding=ROUND_HALF_UP)


class TaxService:
    """Service for filing and settling tax records."""

    def __init__(self, db: Database):
        self.db = db

    def create_tax_record(
        self,
        period: str,
        type: str,
        taxable_amount,
        tax_rate=None,
        record_id: Optional[str] = None,
    ) -> TaxRecord:
        """File a tax record for a period.

        Args:
            period: ``YYYY-MM`` period the tax is due for
            type: Tax type, e.g. vat
            taxable_amount: Base amount
            tax_rate: Percent rate; defaults by type when omitted
            record_id: Optional caller-assigned ID

        Returns:
            The stored tax record with its computed tax amount

        Raises:
            ValidationError: If the period, type or amounts are invalid, or
                no rate is given for a type without a default
        """
        key = period_key(period)
        tax_type = (type or "").strip().lower()
        if not tax_type:
            raise ValidationError("Tax type is required")
        taxable = to_amount(taxable_amount, "taxable amount")
        if tax_rate is None:
            if tax_type not in DEFAULT_TAX_RATES:
                raise ValidationError(f"Tax rate is required for tax type '{tax_type}'")
            rate = DEFAULT_TAX_RATES[tax_type]
        else:
            rate = to_amount(tax_rate, "tax rate")

        tax_amount = compute_tax(taxable, rate)
        new_id = self.db.create_tax_record(
            period=key,
            type=tax_type,
            taxable_amount=taxable,
            tax_rate=rate,
            tax_amount=tax_amount,
            status=TAX_WORKFLOW.initial.value,
            record_id=record_id,
        )
        logger.info("Filed %s tax record for %s: %s", tax_type, key, tax_amount)
        return self.db.get_tax_record(new_id)

    def list_tax_records(self, period: Optional[str] = None) -> list[TaxRecord]:
        return self.db.list_tax_records(period=period_key(period) if period else None)

    def update_status(self, record_id: str, status: str) -> TaxRecord:
        """Move a tax record along pending, declared, paid.

        Raises:
            NotFoundError: If the record does not exist
            StatusTransitionError: If the workflow does not allow the change
        """
        record = self.db.get_tax_record(record_id)
        if record is None:
            raise NotFoundError(not_found("Tax record", record_id))
        if TAX_WORKFLOW.advance(record.status, status):
            new_status = TAX_WORKFLOW.coerce(status).value
            self.db.update_document_status("tax_record", record_id, new_status)
            logger.info("Tax record %s moved to %s", record_id, new_status)
        return self.db.get_tax_record(record_id)
