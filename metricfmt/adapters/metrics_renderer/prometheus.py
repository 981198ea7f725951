"""Prometheus implementation of the MetricsRenderer protocol.

Wraps a CollectorRegistry so the metrics server can serialize every
registered collector in whichever exposition format the scraper asked for.
"""

from io import BytesIO

from prometheus_client import REGISTRY, CollectorRegistry

from metricfmt.core.protocols.metrics_renderer import MetricsRenderer
from metricfmt.domains.negotiation import Codecs, new_encoder


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render all metrics in a CollectorRegistry with a negotiated encoder."""

    def __init__(
        self, registry: CollectorRegistry = REGISTRY, codecs: Codecs | None = None
    ) -> None:
        self._registry = registry
        self._codecs = codecs

    def render(self, accept: str | None) -> tuple[bytes, str]:
        buffer = BytesIO()
        encoder, content_type = new_encoder(buffer, accept, codecs=self._codecs)
        for family in self._registry.collect():
            encoder.encode(family)
        return buffer.getvalue(), content_type
