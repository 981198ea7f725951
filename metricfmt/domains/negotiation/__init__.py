"""Negotiation domain - Accept header parsing and exposition format selection."""

from metricfmt.domains.negotiation.accept import parse_accept
from metricfmt.domains.negotiation.negotiator import (
    Codecs,
    FormatEncoder,
    default_codecs,
    negotiate,
    new_encoder,
)
from metricfmt.domains.negotiation.types import (
    FMT_PROTO_COMPACT,
    FMT_PROTO_DELIM,
    FMT_PROTO_TEXT,
    FMT_TEXT,
    PROTOCOL_VERSION,
    ExpositionFormat,
    MediaTypeCandidate,
)

__all__ = [
    "Codecs",
    "ExpositionFormat",
    "FMT_PROTO_COMPACT",
    "FMT_PROTO_DELIM",
    "FMT_PROTO_TEXT",
    "FMT_TEXT",
    "FormatEncoder",
    "MediaTypeCandidate",
    "PROTOCOL_VERSION",
    "default_codecs",
    "negotiate",
    "new_encoder",
    "parse_accept",
]
