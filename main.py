"""
Entry point for the BurnView API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import router
from config import APP_VERSION, settings
from engine.slo.chart import clear_chart_cache

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "BurnView %s starting (curve_intervals=%d, alert_scan_intervals=%d)",
        APP_VERSION,
        settings.curve_intervals,
        settings.alert_scan_intervals,
    )
    try:
        yield
    finally:
        clear_chart_cache()
        log.info("BurnView stopped")


app = FastAPI(
    title="BurnView",
    description="SLO burn-rate curves and multi-window, multi-burn-rate alert zones for what-if incidents.",
    version=APP_VERSION,
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


@app.get("/api/v1/ready", tags=["health"], summary="Readiness probe")
async def ready() -> JSONResponse:
    return JSONResponse(status_code=200, content={"ready": True})


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=True,
    )
