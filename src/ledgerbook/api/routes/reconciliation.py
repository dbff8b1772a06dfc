"""Bank record and reconciliation routes."""

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_reconciliation_service
from ledgerbook.api.schemas import (
    BankRecordCreate,
    BankRecordResponse,
    CreatedResponse,
    InternalCheckResponse,
    MatchUpdate,
    MessageResponse,
    ReconciliationSummaryResponse,
)
from ledgerbook.domain.reconciliation import ReconciliationService

router = APIRouter(tags=["reconciliation"])


@router.get("/bank-records", response_model=list[BankRecordResponse])
def list_bank_records(service: ReconciliationService = Depends(get_reconciliation_service)):
    return [BankRecordResponse.model_validate(r) for r in service.list_bank_records()]


@router.post("/bank-records", response_model=CreatedResponse)
def create_bank_record(
    body: BankRecordCreate,
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    record = service.create_bank_record(
        date=body.date,
        description=body.description,
        amount=body.amount,
        direction=body.direction,
        record_id=body.id,
    )
    return CreatedResponse(id=record.id, message="Bank record created")


@router.put("/bank-records/{record_id}/match", response_model=MessageResponse)
def update_match(
    record_id: str,
    body: MatchUpdate,
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    """Match a bank record to a posted voucher, or clear the match."""
    service.set_match(record_id, body.matched, body.matched_voucher_id)
    return MessageResponse(message="Match status updated")


@router.delete("/bank-records/{record_id}", response_model=MessageResponse)
def delete_bank_record(
    record_id: str,
    service: ReconciliationService = Depends(get_reconciliation_service),
):
    service.delete_bank_record(record_id)
    return MessageResponse(message="Bank record deleted")


@router.get("/reconciliation/internal-check", response_model=InternalCheckResponse)
def internal_check(service: ReconciliationService = Depends(get_reconciliation_service)):
    """Recheck that every posted voucher balances within 0.01."""
    return InternalCheckResponse.model_validate(service.internal_check())


@router.get("/reconciliation/summary", response_model=ReconciliationSummaryResponse)
def summary(service: ReconciliationService = Depends(get_reconciliation_service)):
    return ReconciliationSummaryResponse.model_validate(service.summary())
