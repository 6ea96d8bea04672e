"""Fixtures compartidas por los tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from common.db import build_engine
from extraction_api.analytics.notifier import NotificationOrchestrator, Notifier
from extraction_api.analytics.repository import AnalyticsRepository
from extraction_api.dependencies import get_history, get_orchestrator, get_repository
from extraction_api.history import MetricsHistory
from extraction_api.main import app


@pytest.fixture
def engine(tmp_path):
    """Engine SQLite aislado por test."""
    eng = build_engine(f"sqlite:///{tmp_path / 'analytics.db'}")
    yield eng
    eng.dispose()


@pytest.fixture
def repository(engine) -> AnalyticsRepository:
    return AnalyticsRepository(engine)


@pytest.fixture
def metrics_file(tmp_path):
    return tmp_path / "metrics.json"


@pytest.fixture
def history(metrics_file) -> MetricsHistory:
    return MetricsHistory.load(metrics_file)


@pytest.fixture
def mock_notifier():
    """Notificador que registra las alertas recibidas."""
    notifier = MagicMock(spec=Notifier)
    notifier.send_alert = MagicMock(return_value=None)
    return notifier


@pytest.fixture
def client(history, repository, mock_notifier):
    """TestClient con historial, repositorio y notificadores aislados."""
    orchestrator = NotificationOrchestrator([mock_notifier])
    app.dependency_overrides[get_history] = lambda: history
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
