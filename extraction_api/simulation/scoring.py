"""Puntuación de calidad y recomendaciones para una extracción.

Funciones puras sobre los campos crudos de una lectura; no dependen de
`ExtractionMetrics` para poder usarse antes de construir la instancia.
"""

from __future__ import annotations

import math
from typing import Dict, List, Tuple

from .models import (
    PRESSURE_RANGE,
    TEMPERATURE_RANGE,
    TIME_RANGE,
    CoffeeType,
    GrindSize,
    RoastLevel,
)

MAX_DIMENSION_SCORE = 30
PAIRING_BONUS = 5
GRIND_BONUS = 5

# Combinaciones café/tueste que suman bonus, con su sugerencia asociada.
ROAST_PAIRINGS: Dict[Tuple[CoffeeType, RoastLevel], str] = {
    (CoffeeType.ARABICA, RoastLevel.MEDIUM): "Try a Light roast Arabica to bring out brighter, more floral notes",
    (CoffeeType.ROBUSTA, RoastLevel.DARK): "Try a Medium roast Robusta to soften bitterness",
    (CoffeeType.BLEND, RoastLevel.MEDIUM): "Try a Dark roast Blend for a bolder body",
    (CoffeeType.SINGLE_ORIGIN, RoastLevel.LIGHT): "Try a Medium roast Single Origin for a more balanced cup",
}

COARSER_GRIND_TIP = "Use a coarser grind to shorten the extraction"
FINER_GRIND_TIP = "Use a finer grind to lengthen the extraction"


def dimension_score(value: float, bounds: Tuple[float, float]) -> int:
    """Puntos (máx. 30) de una dimensión según su rango perfecto.

    Fuera de rango el resultado se trunca hacia cero y no se acota: valores
    muy por encima del máximo dan puntuaciones negativas. NaN e infinitos
    puntúan 0.
    """
    if not math.isfinite(value):
        return 0
    low, high = bounds
    if value < low:
        return int(MAX_DIMENSION_SCORE * (1 - value / low))
    if value > high:
        return int(MAX_DIMENSION_SCORE * (high - value) / (high - low))
    return MAX_DIMENSION_SCORE


def grind_matches_time(grind_size: GrindSize, time_seconds: int) -> bool:
    low, high = TIME_RANGE
    if grind_size is GrindSize.COARSE:
        return time_seconds < low
    if grind_size is GrindSize.MEDIUM:
        return low <= time_seconds <= high
    return time_seconds > high


def calculate_quality_score(
    temperature: float,
    pressure: float,
    time_seconds: int,
    coffee_type: CoffeeType,
    roast_level: RoastLevel,
    grind_size: GrindSize,
) -> int:
    score = (
        dimension_score(temperature, TEMPERATURE_RANGE)
        + dimension_score(pressure, PRESSURE_RANGE)
        + dimension_score(time_seconds, TIME_RANGE)
    )
    if (coffee_type, roast_level) in ROAST_PAIRINGS:
        score += PAIRING_BONUS
    if grind_matches_time(grind_size, time_seconds):
        score += GRIND_BONUS
    return score


def _range_tip(value: float, bounds: Tuple[float, float], label: str, unit: str) -> str | None:
    low, high = bounds
    if value < low:
        return f"Increase {label} to {low} {unit}"
    if value > high:
        return f"Decrease {label} to {high} {unit}"
    return None


def generate_recommendations(
    temperature: float,
    pressure: float,
    time_seconds: int,
    coffee_type: CoffeeType,
    roast_level: RoastLevel,
    grind_size: GrindSize,
) -> List[str]:
    """Sugerencias de mejora en orden fijo.

    temperatura, presión, tiempo, molienda/tiempo y café/tueste; cada
    chequeo aporta como mucho una línea.
    """
    tips = [
        _range_tip(temperature, TEMPERATURE_RANGE, "temperature", "degrees"),
        _range_tip(pressure, PRESSURE_RANGE, "pressure", "psi"),
        _range_tip(time_seconds, TIME_RANGE, "extraction time", "seconds"),
    ]

    low, high = TIME_RANGE
    if grind_size is GrindSize.FINE and time_seconds > high:
        tips.append(COARSER_GRIND_TIP)
    elif grind_size is GrindSize.COARSE and time_seconds < low:
        tips.append(FINER_GRIND_TIP)

    tips.append(ROAST_PAIRINGS.get((coffee_type, roast_level)))

    return [tip for tip in tips if tip is not None]
