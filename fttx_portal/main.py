"""NC FTTX Portal — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - The catalog is built once per app and only read afterwards
    - Templates are loaded and compiled before the app exists (TemplateAssetsError otherwise)
    - Global error handlers map render failures → plain text, everything else → JSON 500
    - Importing this module builds nothing: apps come from create_app only

Design Decisions:
    - create_app factory: tests build isolated apps, the runner builds one app,
      and uvicorn loads it with `uvicorn fttx_portal.main:create_app --factory`
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Static files mounted AFTER routes and only when the directory exists
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.staticfiles import StaticFiles

from fttx_portal import __version__
from fttx_portal.api.error_handlers import register_error_handlers
from fttx_portal.api.routes import health, metrics, municipalities, pages
from fttx_portal.config import Settings, get_settings
from fttx_portal.core.municipality import MunicipalityCatalog
from fttx_portal.core.nc_municipalities import reference_catalog
from fttx_portal.infrastructure.observability import setup_logging
from fttx_portal.infrastructure.request_metrics import RequestCounter
from fttx_portal.infrastructure.templates import load_templates

logger = logging.getLogger(__name__)

TRACKED_ENDPOINTS = ("/", "/health", "/metrics", "/api/municipalities")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        "NC FTTX Portal started",
        extra={"municipality_count": len(app.state.catalog)},
    )
    yield
    logger.info("NC FTTX Portal shutting down")


def create_app(
    settings: Settings | None = None,
    catalog: MunicipalityCatalog | None = None,
) -> FastAPI:
    """Build the portal app. Raises TemplateAssetsError if templates can't load."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.page_title, version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else reference_catalog()
    app.state.templates = load_templates(settings.templates_dir)
    app.state.request_counter = RequestCounter(TRACKED_ENDPOINTS, methods=("GET",))

    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        response = await call_next(request)
        if response.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
            request.app.state.request_counter.record(request.method, request.url.path)
        return response

    # Routes — explicit registration
    app.include_router(pages.router)
    app.include_router(health.router)
    app.include_router(metrics.router)
    app.include_router(municipalities.router)

    if settings.static_dir.is_dir():
        app.mount(
            "/static", StaticFiles(directory=str(settings.static_dir)), name="static",
        )
    else:
        logger.warning(f"Static directory not found, /static disabled: {settings.static_dir}")

    register_error_handlers(app)
    return app
