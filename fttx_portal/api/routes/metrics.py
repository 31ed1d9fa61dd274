"""Metrics Endpoint — exposition-format text for scrapers.

Invariants:
    - Municipality gauge == len(catalog) on every scrape
    - Request counter samples come from RequestCounter.snapshot()
    - Content-Type is text/plain
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from fttx_portal.api.dependencies import get_catalog, get_request_counter
from fttx_portal.core.metrics_exposition import build_portal_metrics, render_exposition
from fttx_portal.core.municipality import MunicipalityCatalog
from fttx_portal.infrastructure.request_metrics import RequestCounter

router = APIRouter(tags=["metrics"])

EXPOSITION_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics(
    catalog: MunicipalityCatalog = Depends(get_catalog),
    counter: RequestCounter = Depends(get_request_counter),
):
    families = build_portal_metrics(len(catalog), counter.snapshot())
    return PlainTextResponse(
        render_exposition(families), media_type=EXPOSITION_CONTENT_TYPE,
    )
