"""Portal Page — renders the municipality directory as HTML.

Invariants:
    - total_count passed to the template equals the number of records passed
    - Records rendered in catalog order
    - Any error raised while rendering surfaces as TemplateRenderError (500, plain text)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from fttx_portal.api.dependencies import (
    get_catalog, get_settings_from_app, get_templates,
)
from fttx_portal.config import Settings
from fttx_portal.core.errors import TemplateRenderError
from fttx_portal.core.municipality import MunicipalityCatalog
from fttx_portal.infrastructure.templates import INDEX_TEMPLATE

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    catalog: MunicipalityCatalog = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates),
    settings: Settings = Depends(get_settings_from_app),
):
    records = list(catalog)
    context = {
        "title": settings.page_title,
        "municipalities": records,
        "total_count": len(records),
    }
    try:
        return templates.TemplateResponse(request, INDEX_TEMPLATE, context)
    except Exception as e:
        raise TemplateRenderError(
            str(e), template_name=INDEX_TEMPLATE, path=request.url.path,
        ) from e
