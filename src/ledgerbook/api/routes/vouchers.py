"""Voucher routes."""

from typing import Optional

from fastapi import APIRouter, Depends

from ledgerbook.api.dependencies import get_voucher_service
from ledgerbook.api.schemas import (
    BatchPostRequest,
    BatchPostResponse,
    CreatedResponse,
    MessageResponse,
    StatusUpdate,
    VoucherCreate,
    VoucherResponse,
)
from ledgerbook.domain.voucher import VoucherService, make_line

router = APIRouter(prefix="/vouchers", tags=["vouchers"])


def _out(vouchers) -> list[VoucherResponse]:
    return [VoucherResponse.model_validate(v) for v in vouchers]


@router.get("", response_model=list[VoucherResponse])
def list_vouchers(
    status: Optional[str] = None,
    service: VoucherService = Depends(get_voucher_service),
):
    """List vouchers, newest first, optionally filtered by status."""
    return _out(service.list_vouchers(status=status))


@router.get("/pending", response_model=list[VoucherResponse])
def list_pending(service: VoucherService = Depends(get_voucher_service)):
    return _out(service.list_pending())


@router.get("/posted", response_model=list[VoucherResponse])
def list_posted(service: VoucherService = Depends(get_voucher_service)):
    return _out(service.list_posted())


@router.post("/post-batch", response_model=BatchPostResponse)
def post_batch(body: BatchPostRequest, service: VoucherService = Depends(get_voucher_service)):
    """Post several vouchers; nothing is posted if any id fails."""
    result = service.post_batch(body.ids)
    return BatchPostResponse(
        message=f"Posted {len(result.posted)} voucher(s)",
        posted=list(result.posted),
        already_posted=list(result.already_posted),
    )


@router.get("/{voucher_id}", response_model=VoucherResponse)
def get_voucher(voucher_id: str, service: VoucherService = Depends(get_voucher_service)):
    return VoucherResponse.model_validate(service.require_voucher(voucher_id))


@router.post("", response_model=CreatedResponse)
def create_voucher(body: VoucherCreate, service: VoucherService = Depends(get_voucher_service)):
    lines = [make_line(l.account, l.side, l.amount, l.memo) for l in body.lines]
    voucher = service.create_voucher(
        voucher_no=body.voucher_no,
        date=body.date,
        lines=lines,
        description=body.description,
        voucher_id=body.id,
    )
    return CreatedResponse(id=voucher.id, message="Voucher created")


@router.put("/{voucher_id}", response_model=MessageResponse)
def update_voucher_status(
    voucher_id: str,
    body: StatusUpdate,
    service: VoucherService = Depends(get_voucher_service),
):
    service.set_status(voucher_id, body.status)
    return MessageResponse(message="Voucher status updated")
