"""MetricsRenderer protocol for serializing collected metrics.

Separates metrics *serialization* (serving /metrics) from metrics
*collection*. The renderer negotiates the exposition format from the
scraper's Accept header, so the server never deals with formats itself.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Protocol for rendering collected metrics into a scrapeable format."""

    def render(self, accept: str | None) -> tuple[bytes, str]:
        """Serialize all collected metrics in the format negotiated from ``accept``.

        Returns:
            The response body and its Content-Type.
        """
        ...
