"""Fake MetricsRenderer for testing.

Records render() calls so tests can assert on metrics-server behaviour
without depending on prometheus-client.
"""

from metricfmt.core.protocols.metrics_renderer import MetricsRenderer


class FakeMetricsRenderer(MetricsRenderer):
    """In-memory spy implementing the MetricsRenderer protocol."""

    def __init__(self, body: bytes = b"# fake metrics\n", content_type: str = "text/plain") -> None:
        self.body = body
        self.content_type = content_type
        self.accept_headers: list[str | None] = []

    def render(self, accept: str | None) -> tuple[bytes, str]:
        self.accept_headers.append(accept)
        return self.body, self.content_type

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.accept_headers.clear()
