"""TextEncoder protocol for the plain-text exposition format.

The negotiator treats the text serializer as a black box so the wire
grammar lives in one adapter. Production uses prometheus-client's text
exposition; tests inject a fake that records the families it was given.
"""

from typing import Protocol, runtime_checkable

from prometheus_client import Metric

from metricfmt.core.protocols.encoder import Sink


@runtime_checkable
class TextEncoder(Protocol):
    """Protocol for writing a single metric family as exposition text."""

    def write(self, sink: Sink, family: Metric) -> int:
        """Write ``family`` to ``sink``, returning the number of bytes written."""
        ...
