"""Modelos de dominio para lecturas de extracción de espresso."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

# Rangos de extracción perfecta (inclusivos en ambos extremos)
TEMPERATURE_RANGE: Tuple[float, float] = (90.0, 96.0)
PRESSURE_RANGE: Tuple[float, float] = (8.0, 10.0)
TIME_RANGE: Tuple[int, int] = (20, 30)

WATER_VOLUME_OZ = 8.0

PERFECT_RESULT = "Perfect Extraction"
SUBOPTIMAL_RESULT = "Suboptimal Extraction"


class CoffeeType(str, Enum):
    ARABICA = "Arabica"
    ROBUSTA = "Robusta"
    BLEND = "Blend"
    SINGLE_ORIGIN = "SingleOrigin"


class RoastLevel(str, Enum):
    LIGHT = "Light"
    MEDIUM = "Medium"
    DARK = "Dark"
    EXTRA_DARK = "ExtraDark"


class GrindSize(str, Enum):
    COARSE = "Coarse"
    MEDIUM = "Medium"
    FINE = "Fine"


def in_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


@dataclass(frozen=True)
class ExtractionMetrics:
    """Lectura de extracción - modelo canónico de dominio.

    Inmutable: `result`, `quality_score` y `recommendations` se calculan a
    partir de los campos crudos antes de construir la instancia (ver
    `simulator.simulate_extraction`). Recalcular implica construir otra.
    """

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
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def temperature_in_range(self) -> bool:
        return in_range(self.temperature, TEMPERATURE_RANGE)

    @property
    def pressure_in_range(self) -> bool:
        return in_range(self.pressure, PRESSURE_RANGE)

    @property
    def time_in_range(self) -> bool:
        return in_range(self.time_seconds, TIME_RANGE)

    def is_perfect(self) -> bool:
        return self.temperature_in_range and self.pressure_in_range and self.time_in_range

    def is_good(self) -> bool:
        # Perfecta implica buena: el tiempo no interviene.
        return self.is_perfect() or (self.temperature_in_range and self.pressure_in_range)

    def to_dict(self) -> Dict[str, Any]:
        """Representación JSON (nombres de campo y variantes estables)."""
        return {
            "timestamp": self.timestamp,
            "temperature": self.temperature,
            "pressure": self.pressure,
            "time_seconds": self.time_seconds,
            "water_volume_oz": self.water_volume_oz,
            "coffee_type": self.coffee_type.value,
            "roast_level": self.roast_level.value,
            "grind_size": self.grind_size.value,
            "result": self.result,
            "quality_score": self.quality_score,
            "recommendations": list(self.recommendations),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractionMetrics":
        """Reconstruye una lectura persistida.

        Los campos derivados se toman tal cual fueron guardados; cualquier
        campo ausente o enum desconocido propaga KeyError / ValueError.
        """
        return cls(
            timestamp=int(data["timestamp"]),
            temperature=float(data["temperature"]),
            pressure=float(data["pressure"]),
            time_seconds=int(data["time_seconds"]),
            water_volume_oz=float(data.get("water_volume_oz", WATER_VOLUME_OZ)),
            coffee_type=CoffeeType(data.get("coffee_type", CoffeeType.ARABICA.value)),
            roast_level=RoastLevel(data.get("roast_level", RoastLevel.MEDIUM.value)),
            grind_size=GrindSize(data.get("grind_size", GrindSize.MEDIUM.value)),
            result=str(data["result"]),
            quality_score=int(data["quality_score"]),
            recommendations=tuple(data.get("recommendations") or ()),
        )
