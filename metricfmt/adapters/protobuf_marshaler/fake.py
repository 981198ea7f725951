"""Fake ProtobufMarshaler for testing.

Records every family passed in so tests can assert on encoder wiring
without depending on the protobuf runtime.
"""

from typing import Any

from metricfmt.core.protocols.protobuf_marshaler import ProtobufMarshaler


class FakeProtobufMarshaler(ProtobufMarshaler):
    """In-memory spy implementing the ProtobufMarshaler protocol."""

    def __init__(self) -> None:
        self.delimited: list[Any] = []
        self.text: list[Any] = []
        self.compact_text: list[Any] = []

    @staticmethod
    def _name(family: Any) -> str:
        return getattr(family, "name", repr(family))

    def marshal_delimited(self, family: Any) -> bytes:
        self.delimited.append(family)
        return f"<delimited {self._name(family)}>".encode()

    def marshal_text(self, family: Any) -> str:
        self.text.append(family)
        return f"<text {self._name(family)}>"

    def marshal_compact_text(self, family: Any) -> str:
        self.compact_text.append(family)
        return f"<compact-text {self._name(family)}>"

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.delimited.clear()
        self.text.clear()
        self.compact_text.clear()
