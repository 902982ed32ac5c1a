from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel

from .errors import ConfigError

ENV_PROGRESS_INTERVAL = "STUDIO_PROGRESS_INTERVAL"
ENV_ANALYSIS_DELAY = "STUDIO_ANALYSIS_DELAY"
ENV_SUMMARY_DELAY = "STUDIO_SUMMARY_DELAY"
ENV_EXPORT_DELAY = "STUDIO_EXPORT_DELAY"
ENV_LOG_LEVEL = "STUDIO_LOG_LEVEL"


class Settings(BaseModel):
    """
    Timing and logging knobs for the simulated workflow.

    progress_interval: seconds between analysis progress ticks
    analysis_delay: seconds until the analysis result is published
    summary_delay: seconds until the AI summary text appears
    export_delay: seconds until an export filename is produced
    """
    progress_interval: float = 0.3
    analysis_delay: float = 3.0
    summary_delay: float = 2.0
    export_delay: float = 2.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            progress_interval=_get_seconds(env, ENV_PROGRESS_INTERVAL, defaults.progress_interval),
            analysis_delay=_get_seconds(env, ENV_ANALYSIS_DELAY, defaults.analysis_delay),
            summary_delay=_get_seconds(env, ENV_SUMMARY_DELAY, defaults.summary_delay),
            export_delay=_get_seconds(env, ENV_EXPORT_DELAY, defaults.export_delay),
            log_level=(env.get(ENV_LOG_LEVEL) or defaults.log_level).strip().upper(),
        )

    @classmethod
    def instant(cls) -> "Settings":
        """All delays zeroed; used by tests and `demo --fast`."""
        return cls(progress_interval=0.0, analysis_delay=0.0, summary_delay=0.0, export_delay=0.0)


def _get_seconds(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        v = float(raw)
    except ValueError:
        return default
    if v < 0:
        raise ConfigError(f"{name} must be >= 0 seconds, got {raw!r}")
    return v
