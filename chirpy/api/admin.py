from __future__ import annotations

from pathlib import Path

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from chirpy.observability.metrics import HitCounter, get_hit_counter

router = APIRouter(prefix="/admin", tags=["admin"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


@router.get("/metrics", response_class=HTMLResponse)
async def metrics(request: Request, counter: HitCounter = Depends(get_hit_counter)) -> HTMLResponse:
    return templates.TemplateResponse(request, "metrics.html", {"hits": counter.load()})


@router.post("/reset", response_class=PlainTextResponse)
async def reset_metrics(counter: HitCounter = Depends(get_hit_counter)) -> PlainTextResponse:
    counter.store(0)
    hits = counter.load()
    structlog.get_logger("admin").info("metrics_reset", hits=hits)
    return PlainTextResponse(f"Metrics reset: {hits}")
