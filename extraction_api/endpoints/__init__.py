"""Módulo de endpoints HTTP.

Contiene los endpoints de la API de extracción organizados por función.
"""

from .health import router as health_router
from .extraction import router as extraction_router
from .analytics import router as analytics_router

__all__ = [
    "health_router",
    "extraction_router",
    "analytics_router",
]
