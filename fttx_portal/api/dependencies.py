"""Request Dependencies — hand app-wide read-only state to route handlers.

Invariants:
    - Every handler reaches the catalog through get_catalog, never a module global
    - State is attached once by create_app and only read here
"""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from fttx_portal.config import Settings
from fttx_portal.core.municipality import MunicipalityCatalog
from fttx_portal.infrastructure.request_metrics import RequestCounter


def get_catalog(request: Request) -> MunicipalityCatalog:
    return request.app.state.catalog


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_request_counter(request: Request) -> RequestCounter:
    return request.app.state.request_counter
