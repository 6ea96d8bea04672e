"""Endpoints de alertas y tendencias."""

from __future__ import annotations

import logging
import time
from typing import List

from fastapi import APIRouter, Depends

from ..analytics.alerts.generator import AlertGenerator
from ..analytics.errors import RepositoryError
from ..analytics.notifier import NotificationOrchestrator
from ..analytics.repository import AnalyticsRepository
from ..analytics.trends.aggregator import calculate_trends
from ..analytics.trends.models import TrendPeriod
from ..dependencies import get_alert_generator, get_history, get_orchestrator, get_repository
from ..history import MetricsHistory
from ..schemas import AlertOut, ExtractionTrendsOut, TrendsResult
from .shared import dispatch_alerts, repository_http_error

router = APIRouter(prefix="/api", tags=["analytics"])
logger = logging.getLogger(__name__)


@router.get("/alerts", response_model=List[AlertOut])
def list_alerts(repository: AnalyticsRepository = Depends(get_repository)):
    try:
        alerts = repository.get_alerts()
    except RepositoryError as e:
        raise repository_http_error(e, "/api/alerts")
    return [AlertOut.from_domain(a) for a in alerts]


@router.get("/alerts/{key}", response_model=AlertOut)
def get_alert(key: str, repository: AnalyticsRepository = Depends(get_repository)):
    try:
        alert = repository.retrieve_alert(key)
    except RepositoryError as e:
        raise repository_http_error(e, "/api/alerts/{key}")
    return AlertOut.from_domain(alert)


@router.post("/trends", response_model=TrendsResult)
def compute_trends(
    period: TrendPeriod = TrendPeriod.DAILY,
    history: MetricsHistory = Depends(get_history),
    repository: AnalyticsRepository = Depends(get_repository),
    generator: AlertGenerator = Depends(get_alert_generator),
    orchestrator: NotificationOrchestrator = Depends(get_orchestrator),
):
    """Calcula tendencias sobre la ventana del período y las persiste.

    Las reglas de alerta se evalúan sobre el resumen: aquí es donde aplica
    la regla de tasa de extracciones perfectas.
    """
    cutoff = int(time.time() - period.window.total_seconds())
    readings = history.since(cutoff)
    trends = calculate_trends(readings, period)
    alerts = generator.generate_alerts(trends)

    try:
        key, _ = repository.store_trends_with_alerts(trends, alerts)
    except RepositoryError as e:
        raise repository_http_error(e, "/api/trends")
    dispatch_alerts(orchestrator, alerts)

    logger.info(
        "[TRENDS] period=%s readings=%d rate=%.2f direction=%s alerts=%d",
        period.value, len(readings), trends.perfect_extraction_rate,
        trends.trend_direction.value, len(alerts),
    )
    return TrendsResult(
        key=key,
        readings=len(readings),
        trends=ExtractionTrendsOut.from_domain(trends),
        alerts=[AlertOut.from_domain(a) for a in alerts],
    )


@router.get("/trends", response_model=List[ExtractionTrendsOut])
def list_trends(repository: AnalyticsRepository = Depends(get_repository)):
    try:
        trends = repository.get_trends()
    except RepositoryError as e:
        raise repository_http_error(e, "/api/trends")
    return [ExtractionTrendsOut.from_domain(t) for t in trends]


@router.get("/trends/{key}", response_model=ExtractionTrendsOut)
def get_trends(key: str, repository: AnalyticsRepository = Depends(get_repository)):
    try:
        trends = repository.retrieve_trends(key)
    except RepositoryError as e:
        raise repository_http_error(e, "/api/trends/{key}")
    return ExtractionTrendsOut.from_domain(trends)
