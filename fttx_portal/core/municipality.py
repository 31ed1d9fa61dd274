"""Municipality Catalog — the immutable, ordered dataset every handler reads.

Invariants:
    - Municipality is frozen: no field changes after construction
    - Catalog ids are unique (DuplicateMunicipalityError otherwise)
    - Iteration order is insertion order, identical for every consumer
    - The catalog never grows or shrinks after construction

Design Decisions:
    - Tuple storage over list: immutability enforced by the type, so concurrent
      readers need no lock (ADR: one shared read-only value per process)
    - Validation in __init__: an invalid catalog can't exist, so startup fails fast
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from fttx_portal.core.domain_types import MunicipalityId, MunicipalityType
from fttx_portal.core.errors import DuplicateMunicipalityError


@dataclass(frozen=True)
class Municipality:
    """A North Carolina permitting authority and its FTTX permit rules."""
    id: MunicipalityId
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


class MunicipalityCatalog:
    """Ordered, read-only collection of municipalities."""

    __slots__ = ("_records",)

    def __init__(self, records: Iterable[Municipality] = ()):
        records = tuple(records)
        seen: set[int] = set()
        for record in records:
            if record.id in seen:
                raise DuplicateMunicipalityError(record.id)
            seen.add(record.id)
        self._records = records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Municipality]:
        return iter(self._records)
