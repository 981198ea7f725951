"""Fake TextEncoder for testing.

Writes a one-line marker per family and records the families so tests can
assert on encoder wiring without parsing exposition text.
"""

from prometheus_client import Metric

from metricfmt.core.protocols.encoder import Sink
from metricfmt.core.protocols.text_encoder import TextEncoder


class FakeTextEncoder(TextEncoder):
    """In-memory spy implementing the TextEncoder protocol."""

    def __init__(self) -> None:
        self.families: list[Metric] = []

    def write(self, sink: Sink, family: Metric) -> int:
        self.families.append(family)
        payload = f"# fake {family.name}\n".encode()
        sink.write(payload)
        return len(payload)

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.families.clear()
