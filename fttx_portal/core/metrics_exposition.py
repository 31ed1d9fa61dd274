"""Metrics Exposition — renders metric families as line-oriented plain text.

Invariants:
    - Every family emits "# HELP", then "# TYPE", then its sample lines
    - Family order and sample order are preserved as given
    - Label values escape backslash, double quote and newline
    - Output always ends with a newline

Design Decisions:
    - Pure formatter over a metrics client library: two fixed families, no
      registry or collectors needed (ADR: read-only portal)
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from fttx_portal.core.domain_types import MetricKind

MUNICIPALITIES_METRIC = "nc_fttx_municipalities_total"
HTTP_REQUESTS_METRIC = "nc_fttx_http_requests_total"


@dataclass(frozen=True)
class MetricSample:
    labels: tuple[tuple[str, str], ...]
    value: float


@dataclass(frozen=True)
class MetricFamily:
    """One named metric with its help text, type and samples."""
    name: str
    help: str
    kind: MetricKind
    samples: tuple[MetricSample, ...] = field(default_factory=tuple)


def _escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _format_value(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _format_sample(name: str, sample: MetricSample) -> str:
    if not sample.labels:
        return f"{name} {_format_value(sample.value)}"
    labels = ",".join(
        f'{key}="{_escape_label_value(val)}"' for key, val in sample.labels
    )
    return f"{name}{{{labels}}} {_format_value(sample.value)}"


def render_exposition(families: Iterable[MetricFamily]) -> str:
    """Render families into exposition-format text."""
    lines: list[str] = []
    for family in families:
        lines.append(f"# HELP {family.name} {family.help}")
        lines.append(f"# TYPE {family.name} {family.kind.value}")
        lines.extend(_format_sample(family.name, s) for s in family.samples)
    return "\n".join(lines) + "\n"


def build_portal_metrics(
    municipality_count: int,
    request_counts: Mapping[tuple[str, str], int],
) -> list[MetricFamily]:
    """Build the portal's metric families.

    request_counts maps (method, endpoint) to completed request totals.
    The GET / sample is always emitted, at 0 before the first page view.
    """
    counts = {("GET", "/"): 0}
    counts.update(request_counts)
    return [
        MetricFamily(
            name=MUNICIPALITIES_METRIC,
            help="Total number of municipalities",
            kind=MetricKind.GAUGE,
            samples=(MetricSample(labels=(), value=municipality_count),),
        ),
        MetricFamily(
            name=HTTP_REQUESTS_METRIC,
            help="Total HTTP requests",
            kind=MetricKind.COUNTER,
            samples=tuple(
                MetricSample(
                    labels=(("method", method), ("endpoint", endpoint)),
                    value=total,
                )
                for (method, endpoint), total in counts.items()
            ),
        ),
    ]
