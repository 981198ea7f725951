"""Plain-text exposition adapters."""

from metricfmt.adapters.text_encoder.fake import FakeTextEncoder
from metricfmt.adapters.text_encoder.prometheus import PrometheusTextEncoder

__all__ = ["PrometheusTextEncoder", "FakeTextEncoder"]
