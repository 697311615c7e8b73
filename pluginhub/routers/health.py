"""
Health check endpoints for the API.
"""
from fastapi import APIRouter, Depends
from typing import Dict, Any
from datetime import datetime

from pluginhub.config import settings
from pluginhub.dependencies import get_system_plugin_registry
from pluginhub.registry import SystemPluginRegistry

router = APIRouter()

@router.get("/health")
async def health_check(
    registry: SystemPluginRegistry = Depends(get_system_plugin_registry),
) -> Dict[str, Any]:
    """
    Basic health check endpoint.
    Returns API status, version information and the size of the plugin registry.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "system_plugins": len(registry),
    }
