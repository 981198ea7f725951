"""Core protocols for dependency injection.

Adapters implement these structurally; the negotiation domain and the
metrics server depend only on the protocols.
"""

from metricfmt.core.protocols.encoder import Encoder, Sink
from metricfmt.core.protocols.metrics_renderer import MetricsRenderer
from metricfmt.core.protocols.protobuf_marshaler import ProtobufMarshaler
from metricfmt.core.protocols.text_encoder import TextEncoder

__all__ = [
    "Encoder",
    "MetricsRenderer",
    "ProtobufMarshaler",
    "Sink",
    "TextEncoder",
]
