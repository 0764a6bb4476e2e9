"""Health/Readiness probe endpoints."""

from fastapi import APIRouter

from ecosort.setup.constants import SERVICE_NAME, SERVICE_VERSION

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def ready() -> dict:
    """서비스 준비 상태 체크."""
    return {"status": "ready", "service": SERVICE_NAME, "version": SERVICE_VERSION}
