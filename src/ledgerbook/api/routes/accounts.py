"""Chart of accounts routes."""

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_account_service
from ledgerbook.api.schemas import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    CreatedResponse,
    MessageResponse,
)
from ledgerbook.domain.account import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountResponse])
def list_accounts(service: AccountService = Depends(get_account_service)):
    """List accounts ordered by code."""
    return [AccountResponse.model_validate(a) for a in service.list_accounts()]


@router.post("", response_model=CreatedResponse)
def create_account(body: AccountCreate, service: AccountService = Depends(get_account_service)):
    account = service.create_account(
        code=body.code,
        name=body.name,
        type=body.type,
        opening_balance=body.balance,
        account_id=body.id,
    )
    return CreatedResponse(id=account.id, message="Account created")


@router.put("/{account_id}", response_model=MessageResponse)
def update_account(
    account_id: str,
    body: AccountUpdate,
    service: AccountService = Depends(get_account_service),
):
    service.update_account(
        account_id,
        code=body.code,
        name=body.name,
        type=body.type,
        balance=body.balance,
    )
    return MessageResponse(message="Account updated")


@router.delete("/{account_id}", response_model=MessageResponse)
def delete_account(account_id: str, service: AccountService = Depends(get_account_service)):
    service.delete_account(account_id)
    return MessageResponse(message="Account deleted")
