from __future__ import annotations

from fastapi import FastAPI

from .endpoints import analytics_router, extraction_router, health_router

app = FastAPI(title="Espresso Extraction Analytics", version="0.3.0")

app.include_router(health_router)
app.include_router(extraction_router)
app.include_router(analytics_router)
