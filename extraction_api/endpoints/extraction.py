"""Endpoints de simulación e historial de extracciones."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..analytics.alerts.generator import AlertGenerator
from ..analytics.errors import RepositoryError
from ..analytics.notifier import NotificationOrchestrator
from ..analytics.repository import AnalyticsRepository
from ..dependencies import get_alert_generator, get_history, get_orchestrator, get_repository
from ..history import MetricsHistory
from ..schemas import ExtractionMetricsOut, ExtractionParams
from ..simulation.simulator import simulate_extraction
from .shared import dispatch_alerts, repository_http_error

router = APIRouter(prefix="/api", tags=["extraction"])
logger = logging.getLogger(__name__)


@router.post("/extraction", response_model=ExtractionMetricsOut)
def start_extraction(
    params: ExtractionParams = Depends(),
    history: MetricsHistory = Depends(get_history),
    repository: AnalyticsRepository = Depends(get_repository),
    generator: AlertGenerator = Depends(get_alert_generator),
    orchestrator: NotificationOrchestrator = Depends(get_orchestrator),
):
    """Simula una extracción, la guarda en el historial y evalúa alertas.

    Rechaza con 400 los parámetros fuera de rango.
    """
    error = params.validation_error()
    if error:
        raise HTTPException(status_code=400, detail=error)

    metrics = simulate_extraction(
        temperature=params.temperature,
        pressure=params.pressure,
        time_seconds=params.time_seconds,
        coffee_type=params.coffee_type,
        roast_level=params.roast_level,
        grind_size=params.grind_size,
    )

    # Las alertas se guardan antes que la lectura: si falla la BD el
    # historial queda intacto.
    alerts = generator.generate_alerts(metrics)
    if alerts:
        try:
            repository.store_alerts(alerts)
        except RepositoryError as e:
            raise repository_http_error(e, "/api/extraction")

    try:
        history.append(metrics)
    except OSError as e:
        logger.exception("Failed to save metrics err=%s", type(e).__name__)
        raise HTTPException(status_code=500, detail=f"Failed to save metrics: {e}")

    dispatch_alerts(orchestrator, alerts)

    logger.info(
        "EXTRACTION result=%s score=%s alerts=%d",
        metrics.result, metrics.quality_score, len(alerts),
    )
    return ExtractionMetricsOut.from_domain(metrics)


@router.get("/metrics", response_model=List[ExtractionMetricsOut])
def get_metrics(history: MetricsHistory = Depends(get_history)):
    readings = history.snapshot()
    if not readings:
        raise HTTPException(status_code=404, detail="No metrics available")
    return [ExtractionMetricsOut.from_domain(m) for m in readings]
