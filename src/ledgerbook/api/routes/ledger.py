"""General ledger routes."""

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_ledger_service
from ledgerbook.api.schemas import LedgerRowResponse, TrialBalanceResponse
from ledgerbook.domain.ledger import LedgerService

router = APIRouter(prefix="/ledger", tags=["ledger"])


@router.get("/trial-balance", response_model=TrialBalanceResponse)
def trial_balance(service: LedgerService = Depends(get_ledger_service)):
    return TrialBalanceResponse.model_validate(service.trial_balance())


@router.get("/{account_id}", response_model=list[LedgerRowResponse])
def account_ledger(account_id: str, service: LedgerService = Depends(get_ledger_service)):
    """Running balance of one account over posted vouchers."""
    return [LedgerRowResponse.model_validate(row) for row in service.account_ledger(account_id)]
