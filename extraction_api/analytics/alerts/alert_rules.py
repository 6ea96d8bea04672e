"""Reglas de negocio para alertas de extracción.

Cada regla es un predicado puro con nombre: recibe un snapshot (una lectura
o un resumen de tendencias) y devuelve una `Alert` o None. Ninguna regla
conoce a las demás.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ...simulation.models import PRESSURE_RANGE, TEMPERATURE_RANGE
from .models import Alert, AlertCategory, AlertSeverity

# Umbral sobre perfect_extraction_rate (escala 0-100 de ExtractionTrends).
LOW_PERFECT_RATE_THRESHOLD = 0.4

Predicate = Callable[[Any], Optional[Alert]]


@dataclass(frozen=True)
class AlertRule:
    """Regla con nombre evaluada contra un snapshot."""

    name: str
    condition: Predicate

    def evaluate(self, snapshot: Any) -> Optional[Alert]:
        return self.condition(snapshot)


def low_perfect_rate(snapshot: Any) -> Optional[Alert]:
    """WARNING / ExtractionQuality cuando la tasa de perfectas es baja.

    Solo aplica a snapshots con `perfect_extraction_rate` (tendencias);
    sobre una lectura individual no dispara.
    """
    rate = getattr(snapshot, "perfect_extraction_rate", None)
    if rate is None or rate >= LOW_PERFECT_RATE_THRESHOLD:
        return None
    return Alert(
        severity=AlertSeverity.WARNING,
        category=AlertCategory.EXTRACTION_QUALITY,
        message="Low perfect extraction rate detected.",
        metadata={"perfect_rate": rate},
    )


def temperature_deviation(snapshot: Any) -> Optional[Alert]:
    """CRITICAL / ParameterDeviation con temperatura fuera de rango."""
    temperature = getattr(snapshot, "temperature", None)
    if temperature is None:
        return None
    low, high = TEMPERATURE_RANGE
    if low <= temperature <= high:
        return None
    return Alert(
        severity=AlertSeverity.CRITICAL,
        category=AlertCategory.PARAMETER_DEVIATION,
        message="Temperature outside acceptable range",
        metadata={"temperature": temperature},
    )


def pressure_instability(snapshot: Any) -> Optional[Alert]:
    """WARNING / ParameterDeviation con presión fuera de rango."""
    pressure = getattr(snapshot, "pressure", None)
    if pressure is None:
        return None
    low, high = PRESSURE_RANGE
    if low <= pressure <= high:
        return None
    return Alert(
        severity=AlertSeverity.WARNING,
        category=AlertCategory.PARAMETER_DEVIATION,
        message="Pressure outside stable range",
        metadata={"pressure": pressure},
    )


def default_rules() -> list[AlertRule]:
    """Reglas por defecto, en orden de registro."""
    return [
        AlertRule("Low Perfect Extraction Rate", low_perfect_rate),
        AlertRule("Temperature Deviation", temperature_deviation),
        AlertRule("Pressure Instability", pressure_instability),
    ]
