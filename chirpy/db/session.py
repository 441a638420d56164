from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url

from chirpy.config import Settings, get_settings

# libpq-style URLs (postgres://...) are common in .env files.
_POSTGRES_ALIASES = {"postgres", "postgresql"}


def normalize_db_url(raw: str) -> URL:
    url = make_url(raw)
    if url.drivername in _POSTGRES_ALIASES:
        # psycopg3 driver uses `postgresql+psycopg://...`
        url = url.set(drivername="postgresql+psycopg")
    return url


def get_engine(settings: Settings | None = None) -> Engine | None:
    """Open the engine for DB_URL, or return None when no URL is configured.

    Like any SQLAlchemy engine, nothing connects until the pool is first used.
    """
    settings = settings or get_settings()
    if not settings.db_url:
        return None
    return create_engine(normalize_db_url(settings.db_url), pool_pre_ping=True)


def masked_db_url(engine: Engine) -> str:
    return engine.url.render_as_string(hide_password=True)
