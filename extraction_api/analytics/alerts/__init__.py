from .models import Alert, AlertCategory, AlertSeverity
from .alert_rules import (
    AlertRule,
    LOW_PERFECT_RATE_THRESHOLD,
    default_rules,
    low_perfect_rate,
    pressure_instability,
    temperature_deviation,
)
from .generator import AlertGenerator, generate_alerts

__all__ = [
    "Alert",
    "AlertCategory",
    "AlertSeverity",
    "AlertRule",
    "LOW_PERFECT_RATE_THRESHOLD",
    "default_rules",
    "low_perfect_rate",
    "pressure_instability",
    "temperature_deviation",
    "AlertGenerator",
    "generate_alerts",
]
