"""ProtobufMarshaler protocol for the protobuf exposition formats.

One marshaler supplies all three protobuf serializations so the encoder
table only has to pick a method, not a library.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProtobufMarshaler(Protocol):
    """Protocol for serializing metric families as ``io.prometheus.client.MetricFamily``."""

    def marshal_delimited(self, family: Any) -> bytes:
        """Serialized message prefixed with its varint-encoded length."""
        ...

    def marshal_text(self, family: Any) -> str:
        """Multi-line protobuf text format."""
        ...

    def marshal_compact_text(self, family: Any) -> str:
        """Single-line protobuf text format."""
        ...
