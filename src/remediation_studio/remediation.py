from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .errors import PreconditionError
from .models import AnalysisResult, Impact, RemediationCategory, RemediationOption

logger = logging.getLogger(__name__)

CATEGORY_ORDER = [
    RemediationCategory.CLEANING,
    RemediationCategory.FORMATTING,
    RemediationCategory.VALIDATION,
]

CATEGORY_ICONS = {
    RemediationCategory.CLEANING: "🧹",
    RemediationCategory.FORMATTING: "📝",
    RemediationCategory.VALIDATION: "✅",
}

IMPUTATION_METHODS = {
    "mean": "Mean imputation",
    "median": "Median imputation",
    "mode": "Mode imputation",
    "forward": "Forward fill",
}
DEFAULT_IMPUTATION_METHOD = "mean"

# Preview figures are fixed; they do not depend on the selection.
PREVIEW_DUPLICATES_REMOVED = 8
PREVIEW_IMPROVED_SCORE = 94


def default_options() -> list[RemediationOption]:
    return [
        RemediationOption(
            id="remove_nulls",
            label="Remove Null Values",
            description="Drop rows with missing critical data",
            category=RemediationCategory.CLEANING,
            impact=Impact.HIGH,
            selected=False,
        ),
        RemediationOption(
            id="impute_nulls",
            label="Impute Missing Values",
            description="Fill missing values with statistical estimates",
            category=RemediationCategory.CLEANING,
            impact=Impact.MEDIUM,
            selected=True,
            config={"method": DEFAULT_IMPUTATION_METHOD},
        ),
        RemediationOption(
            id="remove_duplicates",
            label="Remove Duplicate Rows",
            description="Keep only unique records",
            category=RemediationCategory.CLEANING,
            impact=Impact.MEDIUM,
            selected=True,
        ),
        RemediationOption(
            id="standardize_emails",
            label="Standardize Email Formats",
            description="Fix email format inconsistencies",
            category=RemediationCategory.FORMATTING,
            impact=Impact.LOW,
            selected=True,
        ),
        RemediationOption(
            id="normalize_columns",
            label="Normalize Column Names",
            description="Convert to lowercase, replace spaces with underscores",
            category=RemediationCategory.FORMATTING,
            impact=Impact.LOW,
            selected=False,
        ),
        RemediationOption(
            id="validate_types",
            label="Enforce Data Types",
            description="Convert values to correct data types",
            category=RemediationCategory.VALIDATION,
            impact=Impact.MEDIUM,
            selected=True,
        ),
    ]


def preview_lines(result: AnalysisResult) -> list[str]:
    """Fixed remediation preview text; only the final row count uses the result."""
    final_rows = result.total_rows - PREVIEW_DUPLICATES_REMOVED
    return [
        f"Removed {PREVIEW_DUPLICATES_REMOVED} duplicate rows",
        "Imputed 87 missing values using mean method",
        "Standardized 12 email formats",
        "Enforced data types for 3 columns",
        f"Final dataset: {final_rows:,} rows, improved quality score: {PREVIEW_IMPROVED_SCORE}%",
    ]


class RemediationChecklist:
    """
    In-memory remediation checklist for one analysis result.

    Options start from default_options() and are discarded with the
    checklist. Applying only reports the selection; no data is changed.
    """

    def __init__(self, options: Optional[list[RemediationOption]] = None) -> None:
        self.options: list[RemediationOption] = options if options is not None else default_options()
        self.preview_visible = False
        self.applied = False

    def get(self, option_id: str) -> Optional[RemediationOption]:
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    def toggle_option(self, option_id: str) -> None:
        self.options = [
            o.model_copy(update={"selected": not o.selected}) if o.id == option_id else o
            for o in self.options
        ]

    def update_config(self, option_id: str, config: Optional[dict[str, Any]]) -> None:
        self.options = [
            o.model_copy(update={"config": config}) if o.id == option_id else o
            for o in self.options
        ]

    def imputation_method(self) -> str:
        option = self.get("impute_nulls")
        if option is None or not option.config:
            return DEFAULT_IMPUTATION_METHOD
        return str(option.config.get("method") or DEFAULT_IMPUTATION_METHOD)

    def selected_options(self) -> list[RemediationOption]:
        return [o for o in self.options if o.selected]

    @property
    def selected_count(self) -> int:
        return len(self.selected_options())

    def by_category(self) -> dict[RemediationCategory, list[RemediationOption]]:
        return {c: [o for o in self.options if o.category == c] for c in CATEGORY_ORDER}

    def apply_remediation(self, on_apply: Callable[[list[RemediationOption]], None]) -> list[RemediationOption]:
        selected = self.selected_options()
        if not selected:
            raise PreconditionError("Select at least one remediation option.")
        logger.info("Applying remediation: %s", ", ".join(o.id for o in selected))
        on_apply(selected)
        self.applied = True
        self.preview_visible = True
        return selected

    def toggle_preview(self) -> bool:
        if not self.applied:
            raise PreconditionError("Apply remediation before toggling the preview.")
        self.preview_visible = not self.preview_visible
        return self.preview_visible
