"""Protobuf implementation of the ProtobufMarshaler protocol.

Accepts either a prometheus-client ``Metric`` (converted on the fly) or a
ready ``io.prometheus.client.MetricFamily`` message. Text serializations use
``google.protobuf.text_format``; the delimited framing is a varint length
prefix followed by the binary message.
"""

from __future__ import annotations

from typing import Any

from google.protobuf import text_format

from metricfmt.adapters.protobuf_marshaler import schema
from metricfmt.adapters.protobuf_marshaler.convert import to_protobuf
from metricfmt.core.protocols.protobuf_marshaler import ProtobufMarshaler


# The protobuf runtime only exposes varint framing through private helpers.
def encode_varint(value: int) -> bytes:
    """Base-128 varint encoding of a non-negative integer."""
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def decode_varint(data: bytes, offset: int) -> tuple[int, int]:
    """Decode a varint at ``offset``, returning ``(value, next_offset)``."""
    result = 0
    shift = 0
    while True:
        if offset >= len(data):
            raise ValueError("truncated varint")
        byte = data[offset]
        offset += 1
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result, offset
        shift += 7
        if shift >= 64:
            raise ValueError("varint too long")


def parse_delimited(data: bytes) -> list[Any]:
    """Read back a stream of length-delimited ``MetricFamily`` messages."""
    families = []
    offset = 0
    while offset < len(data):
        size, offset = decode_varint(data, offset)
        end = offset + size
        if end > len(data):
            raise ValueError("truncated message")
        family = schema.MetricFamily()
        family.ParseFromString(data[offset:end])
        families.append(family)
        offset = end
    return families


class ProtobufMetricFamilyMarshaler(ProtobufMarshaler):
    """Serialize metric families with the protobuf runtime."""

    @staticmethod
    def to_message(family: Any) -> Any:
        if isinstance(family, schema.MetricFamily):
            return family
        return to_protobuf(family)

    def marshal_delimited(self, family: Any) -> bytes:
        payload = self.to_message(family).SerializeToString()
        return encode_varint(len(payload)) + payload

    def marshal_text(self, family: Any) -> str:
        return text_format.MessageToString(self.to_message(family))

    def marshal_compact_text(self, family: Any) -> str:
        return text_format.MessageToString(self.to_message(family), as_one_line=True)
