"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MunicipalityId wraps int — ids are assigned once, at dataset construction
    - Municipality kinds encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (ADR: API payloads are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MunicipalityId = NewType("MunicipalityId", int)


# ─── Enums ───────────────────────────────────────────────────────

class MunicipalityType(str, Enum):
    """Kind of permitting authority. Values are the display strings."""
    CITY = "City"
    COUNTY = "County"


class MetricKind(str, Enum):
    """Exposition-format metric types emitted by /metrics."""
    GAUGE = "gauge"
    COUNTER = "counter"
