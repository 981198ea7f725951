"""Exposition format negotiation and encoder construction.

``negotiate`` picks one ``ExpositionFormat`` from an Accept header and
``new_encoder`` binds that format's encoding function to a sink. Neither
can fail: anything unrecognized falls back to the plain-text format.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from metricfmt.core.logging import logger
from metricfmt.core.protocols.encoder import Encoder, Sink
from metricfmt.core.protocols.protobuf_marshaler import ProtobufMarshaler
from metricfmt.core.protocols.text_encoder import TextEncoder
from metricfmt.domains.negotiation.accept import parse_accept
from metricfmt.domains.negotiation.types import (
    PROTO_ENCODINGS,
    PROTO_MESSAGE,
    PROTO_SUBTYPE,
    PROTO_TYPE,
    PROTOCOL_VERSION,
    TEXT_SUBTYPE,
    TEXT_TYPE,
    ExpositionFormat,
    MediaTypeCandidate,
)

_log = logger.with_context(component="negotiation", operation="negotiate")


def _match(candidate: MediaTypeCandidate) -> ExpositionFormat | None:
    if (
        candidate.matches(PROTO_TYPE, PROTO_SUBTYPE)
        and candidate.param("proto") == PROTO_MESSAGE
    ):
        fmt = PROTO_ENCODINGS.get(candidate.param("encoding", ""))
        if fmt is not None:
            return fmt

    if candidate.matches(TEXT_TYPE, TEXT_SUBTYPE) and candidate.param("version", "") in (
        "",
        PROTOCOL_VERSION,
    ):
        return ExpositionFormat.TEXT

    return None


def negotiate(accept: str | None) -> ExpositionFormat:
    """Return the first supported format in client preference order.

    Falls back to ``ExpositionFormat.TEXT`` when nothing in ``accept`` matches,
    including when the header is empty or missing.
    """
    for candidate in parse_accept(accept):
        fmt = _match(candidate)
        if fmt is not None:
            return fmt
    return ExpositionFormat.TEXT


@dataclass(frozen=True)
class Codecs:
    """The serializers the encoding functions delegate to."""

    text: TextEncoder
    protobuf: ProtobufMarshaler


def default_codecs() -> Codecs:
    """Codecs backed by prometheus-client and the protobuf runtime."""
    from metricfmt.adapters.protobuf_marshaler import ProtobufMetricFamilyMarshaler
    from metricfmt.adapters.text_encoder import PrometheusTextEncoder

    return Codecs(text=PrometheusTextEncoder(), protobuf=ProtobufMetricFamilyMarshaler())


def _write_text(codecs: Codecs, sink: Sink, family: Any) -> None:
    codecs.text.write(sink, family)


def _write_proto_delimited(codecs: Codecs, sink: Sink, family: Any) -> None:
    sink.write(codecs.protobuf.marshal_delimited(family))


def _write_proto_text(codecs: Codecs, sink: Sink, family: Any) -> None:
    sink.write((codecs.protobuf.marshal_text(family) + "\n").encode("utf-8"))


def _write_proto_compact_text(codecs: Codecs, sink: Sink, family: Any) -> None:
    sink.write((codecs.protobuf.marshal_compact_text(family) + "\n").encode("utf-8"))


EncodeFunc = Callable[[Codecs, Sink, Any], None]

# One entry per ExpositionFormat member.
ENCODE_FUNCS: dict[ExpositionFormat, EncodeFunc] = {
    ExpositionFormat.TEXT: _write_text,
    ExpositionFormat.PROTO_DELIMITED: _write_proto_delimited,
    ExpositionFormat.PROTO_TEXT: _write_proto_text,
    ExpositionFormat.PROTO_COMPACT_TEXT: _write_proto_compact_text,
}


class FormatEncoder(Encoder):
    """Encoder bound to one sink and one exposition format.

    Holds no state between ``encode`` calls. Not synchronized: callers sharing
    a sink across threads must serialize calls themselves.
    """

    def __init__(self, sink: Sink, fmt: ExpositionFormat, codecs: Codecs | None = None) -> None:
        self.sink = sink
        self.format = fmt
        self._codecs = codecs or default_codecs()
        self._write = ENCODE_FUNCS[fmt]

    @property
    def content_type(self) -> str:
        return self.format.content_type

    def encode(self, family: Any) -> None:
        self._write(self._codecs, self.sink, family)

    def __repr__(self) -> str:
        return f"FormatEncoder(format={self.format.name}, sink={self.sink!r})"


def new_encoder(
    sink: Sink,
    accept: str | None,
    *,
    codecs: Codecs | None = None,
) -> tuple[FormatEncoder, str]:
    """Negotiate a format from ``accept`` and bind it to ``sink``.

    Returns:
        The encoder and the Content-Type to send with its output.
    """
    fmt = negotiate(accept)
    _log.debug(f"Negotiated {fmt.content_type!r} for Accept {accept!r}")
    encoder = FormatEncoder(sink, fmt, codecs)
    return encoder, encoder.content_type
