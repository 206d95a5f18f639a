"""
Web Routes for FastAPI
"""
from fastapi import APIRouter
from datetime import datetime, timezone

from core.config import SERVICE_NAME
from .test_helpers import test_helpers_router

health_router = APIRouter()


@health_router.get("/health")
async def health_check():
    """Basic liveness check, independent of the resource store"""
    return {
        "status": "UP",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
