"""Simulador de extracciones.

Construye una `ExtractionMetrics` completa en dos fases: primero resuelve
los campos crudos (parámetros o defaults) y después calcula los derivados
sobre ese snapshot antes de congelar el registro.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from .models import (
    PERFECT_RESULT,
    PRESSURE_RANGE,
    SUBOPTIMAL_RESULT,
    TEMPERATURE_RANGE,
    TIME_RANGE,
    WATER_VOLUME_OZ,
    CoffeeType,
    ExtractionMetrics,
    GrindSize,
    RoastLevel,
    in_range,
)
from .scoring import calculate_quality_score, generate_recommendations

logger = logging.getLogger(__name__)

# Defaults de simulación (fuera de los rangos perfectos a propósito).
DEFAULT_TEMPERATURE = 98.6
DEFAULT_PRESSURE = 1013.25
DEFAULT_TIME_SECONDS = 60


@dataclass(frozen=True)
class RawExtraction:
    """Campos crudos de una extracción, sin derivados."""

    timestamp: int
    temperature: float
    pressure: float
    time_seconds: int
    coffee_type: CoffeeType
    roast_level: RoastLevel
    grind_size: GrindSize

    def classify(self) -> str:
        perfect = (
            in_range(self.temperature, TEMPERATURE_RANGE)
            and in_range(self.pressure, PRESSURE_RANGE)
            and in_range(self.time_seconds, TIME_RANGE)
        )
        return PERFECT_RESULT if perfect else SUBOPTIMAL_RESULT

    def finalize(self) -> ExtractionMetrics:
        args = (
            self.temperature,
            self.pressure,
            self.time_seconds,
            self.coffee_type,
            self.roast_level,
            self.grind_size,
        )
        return ExtractionMetrics(
            timestamp=self.timestamp,
            temperature=self.temperature,
            pressure=self.pressure,
            time_seconds=self.time_seconds,
            water_volume_oz=WATER_VOLUME_OZ,
            coffee_type=self.coffee_type,
            roast_level=self.roast_level,
            grind_size=self.grind_size,
            result=self.classify(),
            quality_score=calculate_quality_score(*args),
            recommendations=tuple(generate_recommendations(*args)),
        )


def simulate_extraction(
    temperature: Optional[float] = None,
    pressure: Optional[float] = None,
    time_seconds: Optional[int] = None,
    coffee_type: Optional[CoffeeType] = None,
    roast_level: Optional[RoastLevel] = None,
    grind_size: Optional[GrindSize] = None,
) -> ExtractionMetrics:
    """Simula una extracción a partir de parámetros opcionales.

    No valida rangos: cualquier valor se acepta y se puntúa. La validación
    de entrada es responsabilidad de la capa HTTP.
    """
    raw = RawExtraction(
        timestamp=int(time.time()),
        temperature=DEFAULT_TEMPERATURE if temperature is None else float(temperature),
        pressure=DEFAULT_PRESSURE if pressure is None else float(pressure),
        time_seconds=DEFAULT_TIME_SECONDS if time_seconds is None else int(time_seconds),
        coffee_type=coffee_type or CoffeeType.ARABICA,
        roast_level=roast_level or RoastLevel.MEDIUM,
        grind_size=grind_size or GrindSize.MEDIUM,
    )
    metrics = raw.finalize()

    logger.debug(
        "SIMULATED temp=%.2f pressure=%.2f time=%s result=%s score=%s",
        metrics.temperature, metrics.pressure, metrics.time_seconds,
        metrics.result, metrics.quality_score,
    )
    return metrics
