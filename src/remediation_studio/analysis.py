from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .config import Settings
from .errors import PreconditionError
from .models import AnalysisResult, FileHandle
from .tasks import CancelToken, Sleep, TaskOutcome, Tick, run_simulated

logger = logging.getLogger(__name__)

PROGRESS_STEP = 10
PROGRESS_CAP = 90
PROGRESS_DONE = 100

MISMATCH_PENALTY = 5

SAMPLE_ANALYSIS = AnalysisResult(
    total_rows=1247,
    total_columns=5,
    null_counts={"name": 23, "email": 5, "age": 47, "department": 12},
    duplicate_rows=8,
    data_types={
        "id": "integer",
        "name": "string",
        "email": "string",
        "age": "integer",
        "department": "string",
    },
    schema_mismatches=["Invalid email formats detected", "Age column contains non-numeric values"],
)


def progress_schedule() -> list[int]:
    """Progress values emitted by one analysis run, in order."""
    return list(range(0, PROGRESS_CAP + 1, PROGRESS_STEP)) + [PROGRESS_DONE]


def _js_round(x: float) -> int:
    # Math.round: halves go up, including for negatives.
    return int(math.floor(x + 0.5))


def quality_score(result: Optional[AnalysisResult]) -> int:
    """Heuristic 0-100 score from null rate, duplicate rate and mismatch count.

    100 - null% - duplicate% - 5 * mismatches, floored at 0 and rounded.
    A result with no rows or no columns scores 0.
    """
    if result is None or result.total_rows <= 0 or result.total_cells <= 0:
        return 0
    null_percentage = result.total_nulls / result.total_cells * 100
    duplicate_percentage = result.duplicate_rows / result.total_rows * 100
    score = max(
        0.0,
        100 - null_percentage - duplicate_percentage - len(result.schema_mismatches) * MISMATCH_PENALTY,
    )
    return _js_round(score)


def score_band(score: int) -> str:
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"


@dataclass(frozen=True)
class QualityIssue:
    """One row of the "Data Quality Issues" list."""

    kind: str  # null | duplicate | schema
    message: str
    badge: str
    column: Optional[str] = None


def quality_issues(result: AnalysisResult) -> list[QualityIssue]:
    issues: list[QualityIssue] = []
    for column, count in result.null_counts.items():
        if count > 0:
            issues.append(QualityIssue("null", f"Null values in {column}", f"{count} records", column=column))
    if result.duplicate_rows > 0:
        issues.append(QualityIssue("duplicate", "Duplicate rows detected", f"{result.duplicate_rows} rows"))
    for mismatch in result.schema_mismatches:
        issues.append(QualityIssue("schema", mismatch, "Schema Issue"))
    return issues


class AnalysisPanel:
    """
    State of the analysis step: in-flight flag, progress counter and last result.

    The result published on completion is always SAMPLE_ANALYSIS; the
    selected file is only checked for presence.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.is_analyzing = False
        self.progress = 0
        self.result: Optional[AnalysisResult] = None

    def can_run(self, file: Optional[FileHandle]) -> bool:
        return file is not None and not self.is_analyzing

    @property
    def score(self) -> int:
        return quality_score(self.result)

    def _set_progress(self, value: int, on_progress: Optional[Callable[[int], None]]) -> None:
        self.progress = value
        if on_progress is not None:
            on_progress(value)

    def _ticks(self, on_progress: Optional[Callable[[int], None]]) -> list[Tick]:
        interval = self.settings.progress_interval
        ticks = [
            Tick(interval, lambda v=v: self._set_progress(v, on_progress))
            for v in range(PROGRESS_STEP, PROGRESS_CAP + 1, PROGRESS_STEP)
        ]
        elapsed = interval * len(ticks)
        ticks.append(
            Tick(
                max(0.0, self.settings.analysis_delay - elapsed),
                lambda: self._set_progress(PROGRESS_DONE, on_progress),
            )
        )
        return ticks

    def run_analysis(
        self,
        file: Optional[FileHandle],
        on_complete: Callable[[AnalysisResult], None],
        *,
        on_progress: Optional[Callable[[int], None]] = None,
        sleep: Sleep = time.sleep,
        cancel: Optional[CancelToken] = None,
    ) -> TaskOutcome[AnalysisResult]:
        if file is None:
            raise PreconditionError("Select a file before running the analysis.")
        if self.is_analyzing:
            raise PreconditionError("An analysis is already in progress.")

        logger.info("Analysis started for %s", file.name)
        self.is_analyzing = True
        self._set_progress(0, on_progress)

        def publish() -> AnalysisResult:
            # A fresh copy per run, so listeners can tell runs apart.
            result = SAMPLE_ANALYSIS.model_copy(deep=True)
            self.result = result
            on_complete(result)
            return result

        try:
            outcome = run_simulated(self._ticks(on_progress), publish, sleep=sleep, cancel=cancel)
        finally:
            self.is_analyzing = False

        if outcome.ok:
            logger.info("Analysis finished: quality score %d%%", self.score)
        elif outcome.cancelled:
            logger.info("Analysis cancelled at %d%%", self.progress)
        else:
            logger.error("Analysis failed: %s", outcome.error)
        return outcome
