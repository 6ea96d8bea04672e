from __future__ import annotations

import logging
from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from .config import get_settings


logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # El repositorio se comparte entre los hilos de FastAPI.
        connect_args["check_same_thread"] = False

    engine = create_engine(database_url, pool_pre_ping=True, future=True, connect_args=connect_args)

    # Test de conexión: deja constancia en logs de si la BD es alcanzable
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("[DB] Test de conexión OK url=%s", engine.url.render_as_string(hide_password=True))
    except Exception:
        logger.exception("[DB] Test de conexión FALLÓ")

    return engine


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    settings = get_settings()
    return build_engine(settings.database_url)
