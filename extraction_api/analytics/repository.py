"""Repositorio de analítica - persistencia clave/valor de alertas y tendencias.

Tabla append-only `analytics_records(record_key, kind, payload)` sobre un engine
SQLAlchemy. Las claves son `<kind>_<millis>_<seq>`: el contador evita
colisiones dentro del mismo milisegundo y conserva el orden de inserción.
"""

from __future__ import annotations

import itertools
import json
import logging
import threading
import time
from typing import Callable, List, Sequence, Tuple, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from .alerts.models import Alert
from .errors import NotFoundError, SerializationError, StoreError
from .trends.models import ExtractionTrends

logger = logging.getLogger(__name__)

ALERT_KIND = "alert"
TREND_KIND = "trend"

T = TypeVar("T")

_sequence = itertools.count()
_sequence_lock = threading.Lock()


def _next_key(kind: str) -> str:
    with _sequence_lock:
        seq = next(_sequence)
    return f"{kind}_{int(time.time() * 1000):013d}_{seq:08d}"


class AnalyticsRepository:
    """Guarda y recupera alertas y tendencias serializadas en JSON."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._ensure_schema()

    def _ensure_schema(self) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    text(
                        """
                        CREATE TABLE IF NOT EXISTS analytics_records (
                            record_key VARCHAR(64) PRIMARY KEY,
                            kind VARCHAR(16) NOT NULL,
                            payload TEXT NOT NULL
                        )
                        """
                    )
                )
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to create analytics schema: {e}") from e

    def ping(self) -> None:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e

    # ------------------------------------------------------------------
    # Escritura
    # ------------------------------------------------------------------

    def _insert(self, rows: Sequence[tuple[str, str, str]]) -> None:
        try:
            with self._engine.begin() as conn:
                for key, kind, payload in rows:
                    conn.execute(
                        text("INSERT INTO analytics_records (record_key, kind, payload) VALUES (:key, :kind, :payload)"),
                        {"key": key, "kind": kind, "payload": payload},
                    )
        except SQLAlchemyError as e:
            logger.exception("[REPO] Insert failed rows=%d", len(rows))
            raise StoreError(str(e)) from e

    @staticmethod
    def _dumps(data: dict) -> str:
        try:
            return json.dumps(data)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e

    def store_trends(self, trends: ExtractionTrends) -> str:
        key = _next_key(TREND_KIND)
        self._insert([(key, TREND_KIND, self._dumps(trends.to_dict()))])
        logger.info("[REPO] Stored trends key=%s period=%s", key, trends.period.value)
        return key

    def store_alerts(self, alerts: Sequence[Alert]) -> List[str]:
        """Guarda las alertas en una sola transacción; devuelve sus claves."""
        rows = [(_next_key(ALERT_KIND), ALERT_KIND, self._dumps(a.to_dict())) for a in alerts]
        if rows:
            self._insert(rows)
            logger.info("[REPO] Stored alerts count=%d", len(rows))
        return [key for key, _, _ in rows]

    def store_trends_with_alerts(self, trends: ExtractionTrends, alerts: Sequence[Alert]) -> Tuple[str, List[str]]:
        """Guarda tendencias y sus alertas en la misma transacción.

        Si falla cualquier inserción no queda nada escrito.
        """
        trend_row = (_next_key(TREND_KIND), TREND_KIND, self._dumps(trends.to_dict()))
        alert_rows = [(_next_key(ALERT_KIND), ALERT_KIND, self._dumps(a.to_dict())) for a in alerts]
        self._insert([trend_row, *alert_rows])
        logger.info(
            "[REPO] Stored trends key=%s period=%s alerts=%d",
            trend_row[0], trends.period.value, len(alert_rows),
        )
        return trend_row[0], [key for key, _, _ in alert_rows]

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    @staticmethod
    def _decode(payload: str, factory: Callable[[dict], T]) -> T:
        try:
            return factory(json.loads(payload))
        except (ValueError, KeyError, TypeError) as e:
            raise SerializationError(str(e)) from e

    def _list(self, kind: str, factory: Callable[[dict], T]) -> List[T]:
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(
                    text("SELECT payload FROM analytics_records WHERE kind = :kind ORDER BY record_key ASC"),
                    {"kind": kind},
                ).fetchall()
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        return [self._decode(row.payload, factory) for row in rows]

    def _get(self, key: str, kind: str, factory: Callable[[dict], T]) -> T:
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    text("SELECT payload FROM analytics_records WHERE record_key = :key AND kind = :kind"),
                    {"key": key, "kind": kind},
                ).fetchone()
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        if not row:
            raise NotFoundError(key)
        return self._decode(row.payload, factory)

    def get_alerts(self) -> List[Alert]:
        return self._list(ALERT_KIND, Alert.from_dict)

    def get_trends(self) -> List[ExtractionTrends]:
        return self._list(TREND_KIND, ExtractionTrends.from_dict)

    def retrieve_alert(self, key: str) -> Alert:
        return self._get(key, ALERT_KIND, Alert.from_dict)

    def retrieve_trends(self, key: str) -> ExtractionTrends:
        return self._get(key, TREND_KIND, ExtractionTrends.from_dict)
