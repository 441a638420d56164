from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from chirpy.config import get_settings
from chirpy.main import create_app


INDEX_HTML = "<html><body><h1>Welcome to Chirpy</h1></body></html>"


@pytest.fixture(autouse=True)
def test_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    site = tmp_path / "site"
    (site / "assets").mkdir(parents=True)
    (site / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (site / "assets" / "logo.svg").write_text("<svg></svg>", encoding="utf-8")

    monkeypatch.setenv("STATIC_DIR", str(site))
    monkeypatch.delenv("DB_URL", raising=False)
    get_settings.cache_clear()

    yield site

    get_settings.cache_clear()


@pytest.fixture
def chirpy_app() -> FastAPI:
    return create_app()


@pytest.fixture
async def api_client(chirpy_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=chirpy_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
