"""Trend aggregation for extraction history."""

from .models import (
    AverageMetrics,
    ExtractionTrends,
    QualityDistribution,
    TrendDirection,
    TrendPeriod,
)
from .aggregator import calculate_trends

__all__ = [
    "AverageMetrics",
    "ExtractionTrends",
    "QualityDistribution",
    "TrendDirection",
    "TrendPeriod",
    "calculate_trends",
]
