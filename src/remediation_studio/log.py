"""Logging setup for the remediation studio.

One stream handler on the package logger, formatted as `LEVEL message`.
Calling setup_logging again only adjusts the level.
"""
from __future__ import annotations

import logging

__all__ = ["setup_logging", "PACKAGE_LOGGER"]

PACKAGE_LOGGER = "remediation_studio"

_handler: logging.Handler | None = None


class LabeledFormatter(logging.Formatter):
    """Prefix each record with a short level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # Unknown names come back as the string "Level X".
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the package logger and return it."""
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_resolve_level(level))

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(LabeledFormatter())
        logger.addHandler(_handler)

    return logger
