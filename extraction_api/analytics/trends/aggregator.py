"""Trend aggregation over extraction history.

Period-agnostic: the caller decides which readings belong to the period,
this module only reduces them.
"""

from __future__ import annotations

import logging
from statistics import mean
from typing import Sequence

from ...simulation.models import ExtractionMetrics
from .models import (
    AverageMetrics,
    ExtractionTrends,
    QualityDistribution,
    TrendDirection,
    TrendPeriod,
)

logger = logging.getLogger(__name__)

IMPROVING_RATE = 75.0
STABLE_RATE = 50.0


def perfect_extraction_rate(history: Sequence[ExtractionMetrics]) -> float:
    """Percentage (0-100) of perfect readings; 0.0 for an empty history."""
    if not history:
        return 0.0
    perfect = sum(1 for m in history if m.is_perfect())
    return perfect / len(history) * 100.0


def average_metrics(history: Sequence[ExtractionMetrics]) -> AverageMetrics:
    if not history:
        return AverageMetrics()
    return AverageMetrics(
        temperature=mean(m.temperature for m in history),
        pressure=mean(m.pressure for m in history),
        extraction_time=mean(float(m.time_seconds) for m in history),
    )


def trend_direction(rate: float) -> TrendDirection:
    if rate > IMPROVING_RATE:
        return TrendDirection.IMPROVING
    if rate > STABLE_RATE:
        return TrendDirection.STABLE
    return TrendDirection.DECLINING


def quality_distribution(history: Sequence[ExtractionMetrics]) -> QualityDistribution:
    perfect = good = suboptimal = 0
    for m in history:
        is_perfect = m.is_perfect()
        is_good = m.is_good()
        if is_perfect:
            perfect += 1
        if is_good:
            good += 1
        if not is_perfect and not is_good:
            suboptimal += 1
    return QualityDistribution(perfect=perfect, good=good, suboptimal=suboptimal)


def calculate_trends(
    history: Sequence[ExtractionMetrics],
    period: TrendPeriod,
) -> ExtractionTrends:
    """Reduce a history into an ExtractionTrends summary.

    Total over any input, including an empty history (rate 0.0,
    zero averages, Declining).
    """
    rate = perfect_extraction_rate(history)
    trends = ExtractionTrends(
        period=period,
        perfect_extraction_rate=rate,
        avg_metrics=average_metrics(history),
        trend_direction=trend_direction(rate),
        quality_distribution=quality_distribution(history),
    )
    logger.debug(
        "[TRENDS] period=%s readings=%d rate=%.2f direction=%s",
        period.value, len(history), rate, trends.trend_direction.value,
    )
    return trends
