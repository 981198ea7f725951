"""Metrics renderer adapters."""

from metricfmt.adapters.metrics_renderer.fake import FakeMetricsRenderer
from metricfmt.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
