"""Health and readiness endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..analytics.errors import StoreError
from ..analytics.repository import AnalyticsRepository
from ..dependencies import get_history, get_repository
from ..history import MetricsHistory

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
def health():
    """Liveness probe — always returns ok if process is running."""
    return {"status": "ok"}


@router.get("/ready")
def ready(
    repository: AnalyticsRepository = Depends(get_repository),
    history: MetricsHistory = Depends(get_history),
):
    """Readiness probe — checks repository connectivity."""
    try:
        repository.ping()
    except StoreError:
        # No exponer detalles del error al cliente
        logger.exception("Readiness check failed")
        raise HTTPException(status_code=503, detail="not ready")
    return {"status": "ready", "readings": len(history)}
