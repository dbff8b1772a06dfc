"""
Health check endpoint

GET /health - server status
"""

from fastapi import APIRouter

from ledgerbook.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
