"""API routes."""

from src.api.routes.health import router as health_router
from src.api.routes.notes import router as notes_router

__all__ = ["health_router", "notes_router"]
