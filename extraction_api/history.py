"""Historial de lecturas de extracción.

Lista en memoria compartida por los handlers, persistida completa en un
archivo JSON tras cada append.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional

from .simulation.models import ExtractionMetrics

logger = logging.getLogger(__name__)


class MetricsHistory:
    """Historial thread-safe de ExtractionMetrics."""

    def __init__(self, path: Optional[str | Path] = None, readings: Optional[List[ExtractionMetrics]] = None):
        self._path = Path(path) if path else None
        self._readings: List[ExtractionMetrics] = list(readings or [])
        self._lock = threading.Lock()

    @classmethod
    def load(cls, path: str | Path) -> "MetricsHistory":
        """Carga el historial desde disco; archivo ausente o corrupto = vacío."""
        path = Path(path)
        readings: List[ExtractionMetrics] = []
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                readings = [ExtractionMetrics.from_dict(item) for item in raw]
            except (OSError, ValueError, KeyError, TypeError) as e:
                logger.warning("[HISTORY] Could not load %s err=%s - starting empty", path, e)
                readings = []
        logger.info("[HISTORY] Loaded %d readings from %s", len(readings), path)
        return cls(path=path, readings=readings)

    def append(self, metrics: ExtractionMetrics) -> None:
        with self._lock:
            self._readings.append(metrics)
            self._save()

    def _save(self) -> None:
        """Escribe el historial completo (debe tener el lock)."""
        if self._path is None:
            return
        payload = json.dumps([m.to_dict() for m in self._readings], indent=2)
        self._path.write_text(payload, encoding="utf-8")
        logger.debug("[HISTORY] Metrics saved to %s", self._path)

    def snapshot(self) -> List[ExtractionMetrics]:
        with self._lock:
            return list(self._readings)

    def since(self, timestamp: int) -> List[ExtractionMetrics]:
        """Lecturas con timestamp >= `timestamp` (segundos epoch)."""
        with self._lock:
            return [m for m in self._readings if m.timestamp >= timestamp]

    def __len__(self) -> int:
        with self._lock:
            return len(self._readings)
