"""Simulación y puntuación de extracciones de espresso.

Estructura modular:
- models.py: ExtractionMetrics, enums y rangos perfectos
- scoring.py: Puntuación de calidad y recomendaciones
- simulator.py: simulate_extraction (builder en dos fases)
"""

from .models import (
    CoffeeType,
    ExtractionMetrics,
    GrindSize,
    RoastLevel,
    PERFECT_RESULT,
    SUBOPTIMAL_RESULT,
)
from .scoring import calculate_quality_score, generate_recommendations
from .simulator import simulate_extraction

__all__ = [
    "CoffeeType",
    "ExtractionMetrics",
    "GrindSize",
    "RoastLevel",
    "PERFECT_RESULT",
    "SUBOPTIMAL_RESULT",
    "calculate_quality_score",
    "generate_recommendations",
    "simulate_extraction",
]
