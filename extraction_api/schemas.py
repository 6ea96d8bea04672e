from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .analytics.alerts.models import Alert, AlertCategory, AlertSeverity
from .analytics.trends.models import ExtractionTrends, TrendDirection, TrendPeriod
from .simulation.models import CoffeeType, ExtractionMetrics, GrindSize, RoastLevel


class ExtractionParams(BaseModel):
    # Todos opcionales: el simulador aplica defaults.
    temperature: Optional[float] = None
    pressure: Optional[float] = None
    time_seconds: Optional[int] = None
    coffee_type: Optional[CoffeeType] = None
    roast_level: Optional[RoastLevel] = None
    grind_size: Optional[GrindSize] = None

    def validation_error(self) -> Optional[str]:
        """Mensaje del primer parámetro fuera de rango, o None."""
        if self.temperature is not None and not (90.0 <= self.temperature <= 96.0):
            return "Temperature must be between 90.0 and 96.0"
        if self.pressure is not None and not (8.0 <= self.pressure <= 10.0):
            return "Pressure must be between 8.0 and 10.0"
        if self.time_seconds is not None and not (20 <= self.time_seconds <= 30):
            return "Time must be between 20 and 30 seconds"
        return None


class ExtractionMetricsOut(BaseModel):
    timestamp: int
    temperature: float
    pressure: float
    time_seconds: int
    water_volume_oz: float
    coffee_type: CoffeeType
    roast_level: RoastLevel
    grind_size: GrindSize
    result: str
    quality_score: int
    recommendations: List[str] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, metrics: ExtractionMetrics) -> "ExtractionMetricsOut":
        return cls(**metrics.to_dict())


class AlertOut(BaseModel):
    id: str
    timestamp: datetime
    severity: AlertSeverity
    category: AlertCategory
    message: str
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def from_domain(cls, alert: Alert) -> "AlertOut":
        return cls(
            id=alert.id,
            timestamp=alert.timestamp,
            severity=alert.severity,
            category=alert.category,
            message=alert.message,
            metadata=alert.metadata,
        )


class AverageMetricsOut(BaseModel):
    temperature: float
    pressure: float
    extraction_time: float


class QualityDistributionOut(BaseModel):
    perfect: int
    good: int
    suboptimal: int


class ExtractionTrendsOut(BaseModel):
    period: TrendPeriod
    perfect_extraction_rate: float
    avg_metrics: AverageMetricsOut
    trend_direction: TrendDirection
    quality_distribution: QualityDistributionOut

    @classmethod
    def from_domain(cls, trends: ExtractionTrends) -> "ExtractionTrendsOut":
        return cls(**trends.to_dict())


class TrendsResult(BaseModel):
    key: str
    readings: int
    trends: ExtractionTrendsOut
    alerts: List[AlertOut] = Field(default_factory=list)
