"""Analítica de extracciones.

Estructura modular:
- alerts/: Alert, reglas y AlertGenerator
- trends/: ExtractionTrends y agregador
- repository.py: Persistencia clave/valor de alertas y tendencias
- notifier.py: Notificadores (Slack, email) y orquestador
- errors.py: Jerarquía de excepciones
"""

from .alerts import Alert, AlertCategory, AlertGenerator, AlertRule, AlertSeverity, generate_alerts
from .trends import ExtractionTrends, TrendDirection, TrendPeriod, calculate_trends
from .errors import (
    NetworkError,
    NotFoundError,
    NotificationError,
    RepositoryError,
    SerializationError,
    StoreError,
)

__all__ = [
    "Alert",
    "AlertCategory",
    "AlertGenerator",
    "AlertRule",
    "AlertSeverity",
    "generate_alerts",
    "ExtractionTrends",
    "TrendDirection",
    "TrendPeriod",
    "calculate_trends",
    "NetworkError",
    "NotFoundError",
    "NotificationError",
    "RepositoryError",
    "SerializationError",
    "StoreError",
]
