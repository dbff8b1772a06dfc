"""Accounting period routes."""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from ledgerbook.api.dependencies import get_period_service
from ledgerbook.api.schemas import (
    CreatedResponse,
    PeriodCheckResponse,
    PeriodClose,
    PeriodCreate,
    PeriodResponse,
)
from ledgerbook.domain.period import PeriodService

router = APIRouter(prefix="/periods", tags=["periods"])


@router.get("", response_model=list[PeriodResponse])
def list_periods(
    status: Optional[str] = None,
    service: PeriodService = Depends(get_period_service),
):
    return [PeriodResponse.model_validate(p) for p in service.list_periods(status=status)]


@router.post("", response_model=CreatedResponse)
def open_period(body: PeriodCreate, service: PeriodService = Depends(get_period_service)):
    found = service.open_period(body.period)
    return CreatedResponse(id=found.id, message=f"Period {found.period} opened")


@router.get("/{period}/check", response_model=PeriodCheckResponse)
def check_period(period: str, service: PeriodService = Depends(get_period_service)):
    return PeriodCheckResponse.model_validate(service.check_period(period))


@router.post("/{period}/close", response_model=PeriodResponse)
def close_period(
    period: str,
    body: Optional[PeriodClose] = Body(default=None),
    service: PeriodService = Depends(get_period_service),
):
    closed_by = body.closed_by if body is not None else None
    return PeriodResponse.model_validate(service.close_period(period, closed_by=closed_by))


@router.post("/{period}/reopen", response_model=PeriodResponse)
def reopen_period(period: str, service: PeriodService = Depends(get_period_service)):
    return PeriodResponse.model_validate(service.reopen_period(period))
