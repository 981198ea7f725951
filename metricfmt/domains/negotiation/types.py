"""Types for exposition format negotiation."""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

PROTOCOL_VERSION = "0.0.4"

PROTO_TYPE = "application"
PROTO_SUBTYPE = "vnd.google.protobuf"
PROTO_MESSAGE = "io.prometheus.client.MetricFamily"

TEXT_TYPE = "text"
TEXT_SUBTYPE = "plain"

WILDCARD = "*"


class ExpositionFormat(str, Enum):
    """The closed set of supported wire formats.

    Each member's value is the canonical Content-Type sent back to the client.
    """

    TEXT = f"text/plain; version={PROTOCOL_VERSION}"
    PROTO_DELIMITED = (
        f"{PROTO_TYPE}/{PROTO_SUBTYPE}; proto={PROTO_MESSAGE}; encoding=delimited"
    )
    PROTO_TEXT = f"{PROTO_TYPE}/{PROTO_SUBTYPE}; proto={PROTO_MESSAGE}; encoding=text"
    PROTO_COMPACT_TEXT = (
        f"{PROTO_TYPE}/{PROTO_SUBTYPE}; proto={PROTO_MESSAGE}; encoding=compact-text"
    )

    @property
    def content_type(self) -> str:
        return self.value


# Value of the ``encoding`` parameter for each protobuf format.
PROTO_ENCODINGS: dict[str, ExpositionFormat] = {
    "delimited": ExpositionFormat.PROTO_DELIMITED,
    "text": ExpositionFormat.PROTO_TEXT,
    "compact-text": ExpositionFormat.PROTO_COMPACT_TEXT,
}

# Content types are exported under their conventional names as well.
FMT_TEXT = ExpositionFormat.TEXT.value
FMT_PROTO_DELIM = ExpositionFormat.PROTO_DELIMITED.value
FMT_PROTO_TEXT = ExpositionFormat.PROTO_TEXT.value
FMT_PROTO_COMPACT = ExpositionFormat.PROTO_COMPACT_TEXT.value


class MediaTypeCandidate(BaseModel):
    """One parsed entry of an Accept header.

    ``params`` keeps the remaining ``key=value`` pairs in header order as a
    tuple of pairs, so a parsed candidate is hashable and cannot be changed.
    The ``q`` parameter is lifted into ``quality``.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    subtype: str
    params: tuple[tuple[str, str], ...] = ()
    quality: float = 1.0
    position: int = 0

    @field_validator("params", mode="before")
    @classmethod
    def pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    def param(self, name: str, default: str | None = None) -> str | None:
        """Value of parameter ``name``; the last occurrence wins."""
        for key, value in reversed(self.params):
            if key == name:
                return value
        return default

    @property
    def specificity(self) -> int:
        """2 for ``type/subtype``, 1 for ``type/*``, 0 for ``*/*``."""
        if self.type == WILDCARD:
            return 0
        if self.subtype == WILDCARD:
            return 1
        return 2

    @property
    def rank(self) -> tuple[float, int, int]:
        """Sort key: higher quality first, then more specific, then header order."""
        return (-self.quality, -self.specificity, self.position)

    def matches(self, type_: str, subtype: str) -> bool:
        """Exact (non-wildcard) type/subtype comparison."""
        return self.type == type_ and self.subtype == subtype
