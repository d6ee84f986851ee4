"""Health Probe — liveness endpoint shared by both services.

Invariants:
    - GET /health always returns 200 if the process is up
    - Reports which service answered (users or todos)

Design Decisions:
    - No readiness probe: neither service has a dependency to become ready on
"""

import logging

from fastapi import APIRouter, Request, status

from crud_api import __version__

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe."""
    return {
        "status": "healthy",
        "service": request.app.state.service_name,
        "version": __version__,
    }
