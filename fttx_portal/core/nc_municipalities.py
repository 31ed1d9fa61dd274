"""Reference Dataset — North Carolina municipalities and their FTTX permit rules.

Invariants:
    - Ids are 1..N in listing order
    - reference_catalog() builds a new catalog from the same literal records every call
"""

from fttx_portal.core.domain_types import MunicipalityId, MunicipalityType
from fttx_portal.core.municipality import Municipality, MunicipalityCatalog

NC_MUNICIPALITIES: tuple[Municipality, ...] = (
    Municipality(
        id=MunicipalityId(1),
        name="Raleigh",
        type=MunicipalityType.CITY,
        permit_expiration="6 months",
        contact_email="permits@raleighnc.gov",
        contact_phone="(919) 996-3000",
        turnaround_days=14,
        permit_fee="$150.00",
        requirements=(
            "Right-of-way permit required for all FTTX installations. "
            "Traffic control plan mandatory for major thoroughfares."
        ),
        gis_link="https://maps.raleighnc.gov/iMAPS/",
        permit_portal_link="https://raleighnc.gov/permits-and-development",
    ),
    Municipality(
        id=MunicipalityId(2),
        name="Charlotte",
        type=MunicipalityType.CITY,
        permit_expiration="6 months",
        contact_email="rowpermit@charlottenc.gov",
        contact_phone="(704) 336-2891",
        turnaround_days=21,
        permit_fee="$200.00",
        requirements=(
            "Comprehensive utility coordination required. "
            "Environmental impact assessment for sensitive areas."
        ),
        gis_link="https://maps.charlotte.gov/",
        permit_portal_link=(
            "https://charlottenc.gov/Transportation/Programs/Pages/"
            "Right-of-Way-Permitting.aspx"
        ),
    ),
    Municipality(
        id=MunicipalityId(3),
        name="Durham",
        type=MunicipalityType.CITY,
        permit_expiration="3 months",
        contact_email="publicworks@durhamnc.gov",
        contact_phone="(919) 560-4326",
        turnaround_days=10,
        permit_fee="$125.00",
        requirements=(
            "Standard ROW application with fiber route plans. "
            "Coordination with Duke Energy required."
        ),
        gis_link="https://durhamnc.maps.arcgis.com/apps/webappviewer/index.html",
        permit_portal_link="https://durhamnc.gov/1329/Right-of-Way-Permits",
    ),
    Municipality(
        id=MunicipalityId(4),
        name="Wake County",
        type=MunicipalityType.COUNTY,
        permit_expiration="12 months",
        contact_email="row@wakegov.com",
        contact_phone="(919) 856-6100",
        turnaround_days=18,
        permit_fee="$175.00",
        requirements=(
            "County-wide coordination required. "
            "Special provisions for unincorporated areas."
        ),
        gis_link="https://maps.wakegov.com/",
        permit_portal_link=(
            "https://www.wakegov.com/departments-government/public-works/"
            "right-way-permits"
        ),
    ),
)


def reference_catalog() -> MunicipalityCatalog:
    return MunicipalityCatalog(NC_MUNICIPALITIES)
