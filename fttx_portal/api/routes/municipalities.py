"""Municipalities API — the full dataset as JSON.

Invariants:
    - Records appear in catalog order (same order as the HTML page)
    - count == len(municipalities), always
    - Query parameters are ignored
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from fttx_portal.api.dependencies import get_catalog
from fttx_portal.core.municipality import MunicipalityCatalog
from fttx_portal.schemas.municipality import MunicipalityListResponse, MunicipalityOut

router = APIRouter(prefix="/api", tags=["municipalities"])


@router.get("/municipalities", response_model=MunicipalityListResponse)
async def list_municipalities(catalog: MunicipalityCatalog = Depends(get_catalog)):
    records = [MunicipalityOut.model_validate(m) for m in catalog]
    return MunicipalityListResponse(
        municipalities=records,
        count=len(records),
        timestamp=datetime.now(timezone.utc),
    )
