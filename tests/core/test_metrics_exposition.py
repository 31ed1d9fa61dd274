"""Tests for render_exposition / build_portal_metrics — pure text formatting, no IO."""

from fttx_portal.core.domain_types import MetricKind
from fttx_portal.core.metrics_exposition import (
    MetricFamily, MetricSample, build_portal_metrics, render_exposition,
)


def test_portal_metrics_with_no_requests():
    text = render_exposition(build_portal_metrics(4, {}))
    assert text == (
        "# HELP nc_fttx_municipalities_total Total number of municipalities\n"
        "# TYPE nc_fttx_municipalities_total gauge\n"
        "nc_fttx_municipalities_total 4\n"
        "# HELP nc_fttx_http_requests_total Total HTTP requests\n"
        "# TYPE nc_fttx_http_requests_total counter\n"
        'nc_fttx_http_requests_total{method="GET",endpoint="/"} 0\n'
    )


def test_gauge_tracks_municipality_count():
    text = render_exposition(build_portal_metrics(17, {}))
    assert "nc_fttx_municipalities_total 17\n" in text


def test_request_counts_keep_root_sample_first():
    families = build_portal_metrics(
        4, {("GET", "/api/municipalities"): 3, ("GET", "/"): 2},
    )
    counter = families[1]
    assert [dict(s.labels)["endpoint"] for s in counter.samples] == [
        "/", "/api/municipalities",
    ]
    assert [s.value for s in counter.samples] == [2, 3]


def test_each_family_has_help_then_type_then_samples():
    lines = render_exposition(build_portal_metrics(4, {("GET", "/health"): 1})).splitlines()
    assert lines[0].startswith("# HELP nc_fttx_municipalities_total")
    assert lines[1].startswith("# TYPE nc_fttx_municipalities_total")
    assert lines[3].startswith("# HELP nc_fttx_http_requests_total")
    assert lines[4].startswith("# TYPE nc_fttx_http_requests_total")
    assert lines[5:] == [
        'nc_fttx_http_requests_total{method="GET",endpoint="/"} 0',
        'nc_fttx_http_requests_total{method="GET",endpoint="/health"} 1',
    ]


def test_label_values_are_escaped():
    family = MetricFamily(
        name="x_total", help="x", kind=MetricKind.COUNTER,
        samples=(MetricSample(labels=(("path", 'a"b\\c\nd'),), value=1),),
    )
    assert 'x_total{path="a\\"b\\\\c\\nd"} 1' in render_exposition([family])


def test_fractional_values_keep_decimals():
    family = MetricFamily(
        name="ratio", help="r", kind=MetricKind.GAUGE,
        samples=(MetricSample(labels=(), value=0.25),),
    )
    assert "ratio 0.25\n" in render_exposition([family])


def test_family_without_samples_still_has_comments():
    family = MetricFamily(name="empty", help="nothing yet", kind=MetricKind.GAUGE)
    assert render_exposition([family]) == (
        "# HELP empty nothing yet\n# TYPE empty gauge\n"
    )
