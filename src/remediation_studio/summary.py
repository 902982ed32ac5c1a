from __future__ import annotations

import logging
import time
from typing import Optional

from .config import Settings
from .models import AnalysisResult
from .tasks import CancelToken, Sleep, delayed

logger = logging.getLogger(__name__)

# The narrative quotes this fixed figure rather than quality_score().
NARRATIVE_SCORE = max(0, 100 - 15 - 5 - 10)


def render_summary_text(result: AnalysisResult) -> str:
    """Templated "AI" narrative. Only the row and column counts are interpolated."""
    return f"""Based on the analysis of your dataset with {result.total_rows:,} rows and {result.total_columns} columns, I've identified several data quality issues that need attention:

**Critical Issues:**
• **Missing Data**: Your dataset contains significant null values, particularly in the 'age' column (47 missing values) and 'name' column (23 missing values). This represents approximately 3.8% of your total data points.

• **Data Integrity**: 8 duplicate rows were detected, which could skew your analysis results and need to be addressed.

• **Schema Validation**: Email format inconsistencies were found, with some entries not following standard email patterns. Additionally, the age column contains non-numeric values that violate the expected integer data type.

**Impact Assessment:**
Your current data quality score is {NARRATIVE_SCORE}%, indicating moderate data quality concerns. The primary issues stem from data collection inconsistencies and missing validation during data entry.

**Recommended Actions:**
1. **Data Cleaning**: Remove or deduplicate the 8 duplicate entries
2. **Missing Value Treatment**: Consider mean imputation for numerical age values and validation rules for required name fields
3. **Format Standardization**: Implement email validation and standardize the age column to ensure numeric consistency

**Business Impact:**
Addressing these issues will improve your data reliability by approximately 25% and ensure more accurate analytics outcomes. The remediation process should take minimal time while significantly enhancing data trust and usability."""


class SummaryController:
    """
    Holds the AI summary card state.

    observe() is called on every render with the current analysis result.
    It generates a summary only for a result object it has not seen before,
    and only while no summary exists. regenerate goes through
    generate_summary() directly and is not guarded.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        sleep: Sleep = time.sleep,
    ) -> None:
        self.settings = settings or Settings()
        self.sleep = sleep
        self.summary = ""
        self.is_open = False
        self.is_generating = False
        self.generation_count = 0
        self._result: Optional[AnalysisResult] = None
        self._last_observed: Optional[AnalysisResult] = None

    def observe(self, result: Optional[AnalysisResult], *, cancel: Optional[CancelToken] = None) -> bool:
        """Automatic trigger. Returns True if a summary was generated."""
        if result is None or result is self._last_observed:
            return False
        self._last_observed = result
        self._result = result
        if self.summary:
            return False
        self.generate_summary(cancel=cancel)
        return True

    def generate_summary(self, *, cancel: Optional[CancelToken] = None) -> Optional[str]:
        if self._result is None:
            return None
        result = self._result

        self.is_generating = True
        try:
            outcome = delayed(
                self.settings.summary_delay,
                lambda: render_summary_text(result),
                sleep=self.sleep,
                cancel=cancel,
            )
        finally:
            self.is_generating = False

        if not outcome.ok:
            logger.info("Summary generation stopped: %s", outcome.error)
            return None

        self.summary = outcome.value or ""
        self.is_open = True
        self.generation_count += 1
        logger.info("Summary generated (%d characters)", len(self.summary))
        return self.summary

    def toggle_open(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open
