"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter

from src.api.dependencies import StorageDep
from src.core.config import settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
@router.get("/")
async def health_check() -> dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.app_env,
    }


@router.get("/ready")
async def readiness_check(storage: StorageDep) -> dict[str, Any]:
    """Readiness check - verifies the storage backend is available."""
    storage_ok = storage.health_check()

    return {
        "status": "ready" if storage_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {"storage": storage_ok},
        "storage": {
            "backend": type(storage).__name__,
            "entries": len(storage),
            "next_id": storage.next_id,
        },
    }


@router.get("/live")
async def liveness_check() -> dict[str, str]:
    """Liveness check - basic endpoint for kubernetes probes."""
    return {"status": "alive"}
