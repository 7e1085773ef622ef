"""
Entry point for the Coincide correlation API server.

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

from api.routes import router
from config import settings
from engine.events.registry import get_registry

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "Correlation engine starting (window=%ss, threshold=%sdeg, clustering=%s)",
        settings.default_time_window_seconds,
        settings.default_angular_threshold_deg,
        settings.cluster_algorithm,
    )
    try:
        yield
    finally:
        log.info("Correlation engine stopping; dropping %d cataloged event(s)", len(get_registry()))
        get_registry().clear()


app = FastAPI(
    title="Coincide Correlation Engine",
    description="Spatio-temporal correlation and clustering of multi-messenger astrophysical detections.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=True,
    )
