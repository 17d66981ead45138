"""Swarm Web Backend - FastAPI application.

This module provides the main FastAPI application with routes for:
- Agent spawn, task execution, kill and cleanup
- Control commands
- Master agent turns
- Health checks
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swarm_web_backend.routes import (
    agents_router,
    commands_router,
    coordinator_router,
    health_router,
)
from swarm_web_backend.services.request_context import RequestIdFilter, request_id_middleware
from swarm_web_backend.services.runtime import RuntimeService

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def _allowed_origins() -> list[str]:
    allowed = os.getenv("WEB_ALLOWED_ORIGINS")
    if allowed:
        return [origin.strip() for origin in allowed.split(",") if origin.strip()]
    web_origin = os.getenv("WEB_ORIGIN")
    return [web_origin] if web_origin else []


def _configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(request_id)s - %(message)s"))
    handler.addFilter(RequestIdFilter())
    for name in ("swarm_web_backend", "swarm_core"):
        named = logging.getLogger(name)
        named.setLevel(logging.INFO)
        if not named.handlers:
            named.addHandler(handler)


_configure_logging()
logger = logging.getLogger("swarm_web_backend")


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Build the runtime on startup and close its clients on shutdown."""
    logger.info("Starting Swarm Web Backend...")
    RuntimeService.get_runtime()
    logger.info("Swarm Web Backend startup complete")
    yield
    await RuntimeService.shutdown()


app = FastAPI(title="Swarm Web Backend", version="1.0.0", lifespan=lifespan)
app.middleware("http")(request_id_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(agents_router)
app.include_router(commands_router)
app.include_router(coordinator_router)
