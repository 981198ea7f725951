"""Exceptions raised by metricfmt.

Negotiation never raises. Errors raised by a sink while encoding propagate
unchanged and are never wrapped in these types.
"""


class MetricfmtError(Exception):
    """Base class for metricfmt errors."""


class MetricFamilyConversionError(MetricfmtError, ValueError):
    """Raised when a metric family cannot be mapped to the protobuf schema."""

    def __init__(self, family: str, message: str) -> None:
        self.family = family
        self.message = message
        super().__init__(f"Cannot convert metric family {family!r}: {message}")
