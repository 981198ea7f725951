"""Exposition format negotiation for Prometheus metric families."""

from metricfmt.domains.negotiation import (
    FMT_PROTO_COMPACT,
    FMT_PROTO_DELIM,
    FMT_PROTO_TEXT,
    FMT_TEXT,
    PROTOCOL_VERSION,
    ExpositionFormat,
    FormatEncoder,
    negotiate,
    new_encoder,
    parse_accept,
)

__all__ = [
    "ExpositionFormat",
    "FMT_PROTO_COMPACT",
    "FMT_PROTO_DELIM",
    "FMT_PROTO_TEXT",
    "FMT_TEXT",
    "FormatEncoder",
    "PROTOCOL_VERSION",
    "negotiate",
    "new_encoder",
    "parse_accept",
]
