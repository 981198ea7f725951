"""Protobuf marshaler adapters."""

from metricfmt.adapters.protobuf_marshaler.fake import FakeProtobufMarshaler
from metricfmt.adapters.protobuf_marshaler.protobuf import (
    ProtobufMetricFamilyMarshaler,
    parse_delimited,
)

__all__ = ["ProtobufMetricFamilyMarshaler", "FakeProtobufMarshaler", "parse_delimited"]
