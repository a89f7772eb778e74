"""
Liveness endpoint.

Mounted at the application root rather than under ``/api``.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from ...core.config import settings

router = APIRouter()

REST_ENDPOINTS = ["/api/juices", "/api/orders"]


@router.get("/health", response_model=Dict[str, Any])
async def health() -> Dict[str, Any]:
    """Report that the server is up and list its entry points."""
    return {
        "status": "OK",
        "message": "Server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "graphqlEndpoint": settings.graphql_path,
        "restEndpoints": REST_ENDPOINTS,
    }
