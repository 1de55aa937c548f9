"""Structured logging helpers for sqlgen."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping, Optional, TextIO

ROOT_LOGGER = "sqlgen"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(dialect)s | %(operation)s | %(name)s | %(message)s"

# Record attributes the generator attaches through ``extra``.
CONTEXT_FIELDS = ("dialect", "operation")


class StatementContextFilter(logging.Filter):
    """
    Give every record the generator context fields so :data:`LOG_FORMAT`
    also formats records emitted outside a generator call.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Attach a stream handler to the ``sqlgen`` logger tree.

    Applications opt in; the library itself only installs a ``NullHandler``.
    Calling this twice returns the handler installed the first time.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            return handler
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(StatementContextFilter())
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class _Timer:
    def __init__(
        self,
        name: str,
        logger: logging.Logger,
        extra: Mapping[str, Any],
        threshold_ms: int,
    ) -> None:
        self.name = name
        self.logger = logger
        self.extra = dict(extra)
        self.threshold_ms = threshold_ms
        self.elapsed_ms = 0.0
        self._start = 0.0

    def __enter__(self) -> "_Timer":
        self._start = time.monotonic()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_ms = (time.monotonic() - self._start) * 1000
        level = logging.WARNING if self.elapsed_ms >= self.threshold_ms else logging.DEBUG
        extra = dict(self.extra, elapsed_ms=self.elapsed_ms)
        self.logger.log(level, "%s took %.2fms", self.name, self.elapsed_ms, extra=extra)


def time_call(name: str, logger: logging.Logger, *, threshold_ms: int = 50, **extra: Any) -> _Timer:
    """
    Time the wrapped block, logging at WARNING once ``threshold_ms`` is reached.
    """
    return _Timer(name, logger, extra, threshold_ms)
