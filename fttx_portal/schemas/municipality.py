"""Municipality Schemas — JSON shape of /api/municipalities.

Invariants:
    - MunicipalityOut field names and order match the domain record
    - MunicipalityListResponse.count equals len(municipalities) (model_validator)
    - timestamp serializes as ISO-8601 UTC
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, model_validator

from fttx_portal.core.domain_types import MunicipalityType


class MunicipalityOut(BaseModel):
    """Public municipality record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    type: MunicipalityType
    permit_expiration: str
    contact_email: str
    contact_phone: str
    turnaround_days: int
    permit_fee: str
    requirements: str
    gis_link: str
    permit_portal_link: str


class MunicipalityListResponse(BaseModel):
    """Full dataset listing with its count and generation time."""
    municipalities: list[MunicipalityOut]
    count: int
    timestamp: datetime

    @model_validator(mode="after")
    def count_matches_list(self):
        if self.count != len(self.municipalities):
            raise ValueError(
                f"count {self.count} does not match {len(self.municipalities)} records",
            )
        return self
