from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from chirpy import __version__
from chirpy.api.admin import router as admin_router
from chirpy.api.chirps import router as chirps_router
from chirpy.api.errors import register_exception_handlers
from chirpy.api.health import router as health_router
from chirpy.config import Settings, get_settings
from chirpy.db.session import get_engine, masked_db_url
from chirpy.observability.logging import configure_logging
from chirpy.observability.metrics import HitCounter
from chirpy.observability.middleware import FileserverHitsMiddleware, RequestContextMiddleware

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings

    if not settings.static_path.is_dir():
        logger.warning("static_dir_missing", static_dir=str(settings.static_path))

    engine = get_engine(settings)
    app.state.db_engine = engine
    if engine is None:
        logger.info("db_disabled")
    else:
        logger.info("db_connection", db_url=masked_db_url(engine))

    try:
        yield
    finally:
        if engine is not None:
            engine.dispose()
        app.state.db_engine = None


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_json)

    app = FastAPI(title="Chirpy", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.hit_counter = HitCounter()
    app.state.db_engine = None

    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router)
    app.include_router(chirps_router)
    app.include_router(admin_router)

    fileserver = StaticFiles(directory=settings.static_path, html=True, check_dir=False)
    app.mount("/app", FileserverHitsMiddleware(fileserver, app.state.hit_counter), name="app")
    return app


app = create_app()
