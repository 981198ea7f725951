"""Prometheus implementation of the TextEncoder protocol.

Delegates the text wire grammar to prometheus-client's own exposition code
by presenting one metric family as a single-family collector.
"""

from collections.abc import Iterator

from prometheus_client import Metric, generate_latest
from prometheus_client.registry import Collector

from metricfmt.core.protocols.encoder import Sink
from metricfmt.core.protocols.text_encoder import TextEncoder


class _SingleFamily(Collector):
    """Collector that yields exactly one pre-built family."""

    def __init__(self, family: Metric) -> None:
        self._family = family

    def collect(self) -> Iterator[Metric]:
        yield self._family


class PrometheusTextEncoder(TextEncoder):
    """Write metric families in the ``text/plain; version=0.0.4`` format."""

    def write(self, sink: Sink, family: Metric) -> int:
        payload = generate_latest(_SingleFamily(family))
        sink.write(payload)
        return len(payload)
