"""Logging for metricfmt.

A single ``logger`` is exported. It is a ``ContextualLogger``: callers derive
child loggers with bound dimensions via ``logger.with_context(...)`` and every
record they emit carries those dimensions as attributes.

The library never installs handlers on import. Applications that embed the
metrics server call ``setup_logging`` once at startup.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping, MutableMapping
from typing import Any

from metricfmt.core.config import settings

_LOGGER_NAME = "metricfmt"


class ContextualLogger(logging.LoggerAdapter):
    """LoggerAdapter that merges bound dimensions into each record's ``extra``."""

    def __init__(self, base: logging.Logger, dimensions: Mapping[str, Any] | None = None) -> None:
        super().__init__(base, dict(dimensions or {}))

    @property
    def dimensions(self) -> dict[str, Any]:
        return dict(self.extra or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` added to the bound context."""
        merged = {**self.dimensions, **dimensions}
        return ContextualLogger(self.logger, merged)


class _ContainerFormatter(logging.Formatter):
    """Single-line formatter; bound context is appended as ``key=value`` pairs."""

    _BASE_FMT = "%(asctime)s %(levelname)-8s %(name)s  %(message)s"

    def __init__(self) -> None:
        super().__init__(fmt=self._BASE_FMT, datefmt="%Y-%m-%dT%H:%M:%S%z")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context_fields(record)
        if context:
            line += "  " + " ".join(f"{k}={v}" for k, v in context.items())
        return line


class _JsonFormatter(logging.Formatter):
    """JSON-lines formatter; bound context fields become top-level keys."""

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%S%z")

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_context_fields(record))

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


# Attributes every LogRecord has; anything else was injected through ``extra``.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime", "taskName"}


def _context_fields(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


def setup_logging(level_name: str | None = None, *, json_format: bool | None = None) -> None:
    """Route the ``metricfmt`` logger to stdout.

    Args:
        level_name: Log level string (debug/info/warning/error).
            Defaults to ``settings.LOG_LEVEL``.
        json_format: Emit JSON lines instead of the single-line format.
            Defaults to ``settings.LOG_JSON``.
    """
    if level_name is None:
        level_name = settings.LOG_LEVEL
    if json_format is None:
        json_format = settings.LOG_JSON
    level = getattr(logging, level_name.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_JsonFormatter() if json_format else _ContainerFormatter())

    base = logging.getLogger(_LOGGER_NAME)
    base.setLevel(level)
    base.handlers.clear()
    base.addHandler(handler)
    base.propagate = False

    # aiohttp's access log is noisy at DEBUG
    logging.getLogger("aiohttp.access").setLevel(max(level, logging.WARNING))


logger = ContextualLogger(logging.getLogger(_LOGGER_NAME))
