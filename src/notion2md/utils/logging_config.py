"""Logging setup for scripts and services embedding notion2md."""

from __future__ import annotations

import logging

from notion2md.config import NOTION2MD_LOG_LEVEL

_STRUCTURED_FIELDS = ("page_id", "block_id", "block_type", "query")
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s%(fields)s"


class _FieldsFilter(logging.Filter):
    """Append the ``extra=`` fields the library logs with to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        pairs = [
            f"{name}={getattr(record, name)}"
            for name in _STRUCTURED_FIELDS
            if getattr(record, name, None) is not None
        ]
        record.fields = (" [" + " ".join(pairs) + "]") if pairs else ""
        return True


def configure_logging(level: str | int | None = None) -> None:
    """Install a stream handler on the ``notion2md`` logger.

    Args:
        level: Level name or number; defaults to ``NOTION2MD_LOG_LEVEL``.
    """
    if level is None:
        level = NOTION2MD_LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger("notion2md")
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.addFilter(_FieldsFilter())
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
