"""Accept header parsing.

Turns an HTTP ``Accept`` value into ``MediaTypeCandidate`` objects ordered
by client preference. Parsing is permissive: a malformed segment is dropped
and the rest of the header still counts.
"""

from __future__ import annotations

import math

from metricfmt.core.logging import logger
from metricfmt.domains.negotiation.types import MediaTypeCandidate

_log = logger.with_context(component="negotiation", operation="parse_accept")


def _parse_segment(segment: str, position: int) -> MediaTypeCandidate | None:
    """Parse one ``type/subtype;k=v;...`` segment, or return None if malformed."""
    media_range, *raw_params = segment.split(";")
    media_range = media_range.strip()
    if not media_range:
        return None

    parts = [part.strip() for part in media_range.split("/")]
    if len(parts) != 2 or not all(parts):
        _log.debug(f"Skipping Accept segment without a single type/subtype: {segment!r}")
        return None

    type_, subtype = parts
    quality = 1.0
    params: list[tuple[str, str]] = []
    for raw in raw_params:
        key, sep, value = raw.partition("=")
        if not sep:
            continue
        key, value = key.strip(), value.strip()
        if key == "q":
            try:
                quality = float(value)
                if not math.isfinite(quality):
                    raise ValueError(value)
            except ValueError:
                _log.debug(f"Skipping Accept segment with bad quality: {segment!r}")
                return None
        else:
            params.append((key, value))

    return MediaTypeCandidate(
        type=type_,
        subtype=subtype,
        params=tuple(params),
        quality=quality,
        position=position,
    )


def parse_accept(header: str | None) -> list[MediaTypeCandidate]:
    """Parse an Accept header into candidates, most preferred first.

    Ordering is by quality (default 1.0) descending, then specificity
    (``type/subtype`` before ``type/*`` before ``*/*``), then the order the
    client listed them in. An empty or missing header yields ``[]``.
    """
    if not header:
        return []

    candidates = []
    for position, segment in enumerate(header.split(",")):
        candidate = _parse_segment(segment, position)
        if candidate is not None:
            candidates.append(candidate)

    return sorted(candidates, key=lambda c: c.rank)
