from __future__ import annotations

import logging

import pytest

from remediation_studio import log
from remediation_studio.config import Settings
from remediation_studio.models import FileHandle


class SleepRecorder:
    """Stands in for time.sleep; records requested delays without waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def csv_file() -> FileHandle:
    return FileHandle(name="customers.csv", size=2048, mime_type="text/csv")


@pytest.fixture(autouse=True)
def _detach_log_handler():
    """Drop the package handler after each test so it never outlives a captured stream."""
    yield
    if log._handler is not None:
        logging.getLogger(log.PACKAGE_LOGGER).removeHandler(log._handler)
        log._handler = None
