"""Health route."""
from fastapi import APIRouter

from models import HealthResponse

router = APIRouter()


@router.get("/api/health", response_model=HealthResponse)
async def health():
    """Liveness check; does not touch the database"""
    return HealthResponse(status="ok")
