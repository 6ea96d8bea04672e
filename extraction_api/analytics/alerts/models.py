"""Modelos de datos para alertas de extracción."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class AlertSeverity(str, Enum):
    INFO = "Info"
    WARNING = "Warning"
    CRITICAL = "Critical"


class AlertCategory(str, Enum):
    EXTRACTION_QUALITY = "ExtractionQuality"
    PARAMETER_DEVIATION = "ParameterDeviation"
    PERFORMANCE_TREND = "PerformanceTrend"
    SYSTEM_HEALTH = "SystemHealth"


@dataclass(frozen=True)
class Alert:
    """Alerta generada por una regla.

    Inmutable; solo el AlertGenerator las crea. El id es un uuid4 para que
    generaciones concurrentes no colisionen.
    """

    severity: AlertSeverity
    category: AlertCategory
    message: str
    metadata: Optional[Dict[str, Any]] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "severity": self.severity.value,
            "category": self.category.value,
            "message": self.message,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Alert":
        ts = datetime.fromisoformat(str(data["timestamp"]).replace("Z", "+00:00"))
        return cls(
            id=str(data["id"]),
            timestamp=ts,
            severity=AlertSeverity(data["severity"]),
            category=AlertCategory(data["category"]),
            message=str(data["message"]),
            metadata=data.get("metadata"),
        )
