"""Instancias compartidas por los endpoints.

Se crean perezosamente a partir de la configuración; los tests las
sustituyen con `app.dependency_overrides`.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from common.config import get_settings
from common.db import get_engine
from .analytics.alerts.generator import AlertGenerator
from .analytics.notifier import NotificationOrchestrator, build_orchestrator
from .analytics.repository import AnalyticsRepository
from .history import MetricsHistory

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_history: Optional[MetricsHistory] = None
_repository: Optional[AnalyticsRepository] = None
_orchestrator: Optional[NotificationOrchestrator] = None
_alert_generator = AlertGenerator()


def get_history() -> MetricsHistory:
    global _history
    if _history is None:
        with _lock:
            if _history is None:
                _history = MetricsHistory.load(get_settings().metrics_file)
    return _history


def get_repository() -> AnalyticsRepository:
    global _repository
    if _repository is None:
        with _lock:
            if _repository is None:
                _repository = AnalyticsRepository(get_engine())
    return _repository


def get_orchestrator() -> NotificationOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        with _lock:
            if _orchestrator is None:
                _orchestrator = build_orchestrator(get_settings())
    return _orchestrator


def get_alert_generator() -> AlertGenerator:
    return _alert_generator

