"""Data models for extraction trends.

Plain dataclasses, rebuilt on every calculation.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Dict


class TrendPeriod(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"

    @property
    def window(self) -> timedelta:
        """Lookback window used by callers that bucket history by period."""
        return _PERIOD_WINDOWS[self]


_PERIOD_WINDOWS = {
    TrendPeriod.DAILY: timedelta(days=1),
    TrendPeriod.WEEKLY: timedelta(days=7),
    TrendPeriod.MONTHLY: timedelta(days=30),
    TrendPeriod.YEARLY: timedelta(days=365),
}


class TrendDirection(str, Enum):
    IMPROVING = "Improving"
    STABLE = "Stable"
    DECLINING = "Declining"


@dataclass(frozen=True)
class AverageMetrics:
    """Mean readings over a history (all 0.0 when empty)."""

    temperature: float = 0.0
    pressure: float = 0.0
    extraction_time: float = 0.0


@dataclass(frozen=True)
class QualityDistribution:
    """Reading counts per quality bucket.

    `good` also counts perfect readings (perfect implies good).
    """

    perfect: int = 0
    good: int = 0
    suboptimal: int = 0


@dataclass(frozen=True)
class ExtractionTrends:
    """Trend summary for one period of history."""

    period: TrendPeriod
    perfect_extraction_rate: float
    avg_metrics: AverageMetrics
    trend_direction: TrendDirection
    quality_distribution: QualityDistribution

    def to_dict(self) -> Dict[str, Any]:
        return {
            "period": self.period.value,
            "perfect_extraction_rate": self.perfect_extraction_rate,
            "avg_metrics": {
                "temperature": self.avg_metrics.temperature,
                "pressure": self.avg_metrics.pressure,
                "extraction_time": self.avg_metrics.extraction_time,
            },
            "trend_direction": self.trend_direction.value,
            "quality_distribution": {
                "perfect": self.quality_distribution.perfect,
                "good": self.quality_distribution.good,
                "suboptimal": self.quality_distribution.suboptimal,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractionTrends":
        avg = data["avg_metrics"]
        dist = data["quality_distribution"]
        return cls(
            period=TrendPeriod(data["period"]),
            perfect_extraction_rate=float(data["perfect_extraction_rate"]),
            avg_metrics=AverageMetrics(
                temperature=float(avg["temperature"]),
                pressure=float(avg["pressure"]),
                extraction_time=float(avg["extraction_time"]),
            ),
            trend_direction=TrendDirection(data["trend_direction"]),
            quality_distribution=QualityDistribution(
                perfect=int(dist["perfect"]),
                good=int(dist["good"]),
                suboptimal=int(dist["suboptimal"]),
            ),
        )
