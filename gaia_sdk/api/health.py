"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..services.plugin_service import PluginService
from .dependencies import get_plugin_service

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check(plugin_service: PluginService = Depends(get_plugin_service)):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "jobs": len(plugin_service.registry),
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
