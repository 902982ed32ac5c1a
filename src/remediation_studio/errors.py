from __future__ import annotations


class StudioError(Exception):
    """Base class for errors raised by the remediation studio engine."""


class PreconditionError(StudioError, ValueError):
    """Raised when an operation is triggered while its control would be disabled."""


class ConfigError(StudioError, ValueError):
    """Raised when a STUDIO_* environment variable holds an unusable value."""
