"""Utilidades comunes a los endpoints de analítica."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from fastapi import HTTPException

from ..analytics.alerts.models import Alert
from ..analytics.errors import NotFoundError, NotificationError, RepositoryError
from ..analytics.notifier import NotificationOrchestrator

logger = logging.getLogger(__name__)


def repository_http_error(e: RepositoryError, context: str) -> HTTPException:
    """Traduce un RepositoryError a HTTPException (404 / 500)."""
    if isinstance(e, NotFoundError):
        return HTTPException(status_code=404, detail=str(e))

    logger.error("Repository error in %s err=%s: %s", context, type(e).__name__, e)
    detail = f"Repository error: {type(e).__name__}"
    if os.getenv("EXTRACTION_DEBUG_ERRORS", "").strip() == "1":
        detail = f"{detail}: {e}"
    return HTTPException(status_code=500, detail=detail)


def dispatch_alerts(orchestrator: NotificationOrchestrator, alerts: Sequence[Alert]) -> int:
    """Notifica cada alerta; los fallos se loguean y no cortan el request.

    Returns:
        Número de alertas notificadas sin error.
    """
    sent = 0
    for alert in alerts:
        try:
            orchestrator.notify(alert)
            sent += 1
        except NotificationError as e:
            logger.warning("[NOTIFY] Failed to dispatch alert id=%s err=%s", alert.id, e)
    return sent
