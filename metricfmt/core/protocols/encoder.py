"""Encoder and Sink protocols.

An ``Encoder`` is what format negotiation hands back to the transport layer:
a value bound to one destination sink and one exposition format, invoked
once per metric family.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Destination for encoded bytes (a socket file, ``BytesIO``, response buffer)."""

    def write(self, data: bytes, /) -> Any:
        """Write ``data``; the return value is ignored."""
        ...


@runtime_checkable
class Encoder(Protocol):
    """Protocol for writing metric families to a bound sink."""

    @property
    def content_type(self) -> str:
        """Canonical Content-Type of the bound exposition format."""
        ...

    def encode(self, family: Any) -> None:
        """Write one metric family to the sink.

        Errors raised by the sink propagate unchanged. Calls are independent
        of each other; no state is carried between them.
        """
        ...
