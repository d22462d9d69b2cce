"""FastAPI application factory.

Assembles CORS and the API routers.  This module is the authoritative
app object — spoken_normalizer/main.py re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spoken_normalizer.api.routes.health import router as health_router
from spoken_normalizer.api.routes.normalize import router as normalize_router
from spoken_normalizer.core.logging import setup_logging
from spoken_normalizer.core.settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    logger.info("Spoken normalizer starting (env=%s)", get_settings().app_env)
    yield


def create_app() -> FastAPI:
    settings = get_settings()
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["*"],
    )
    application.include_router(health_router)
    application.include_router(normalize_router)
    return application


app = create_app()
