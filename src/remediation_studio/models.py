from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class RemediationCategory(str, Enum):
    CLEANING = "cleaning"
    FORMATTING = "formatting"
    VALIDATION = "validation"


class Impact(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FileHandle(BaseModel):
    """
    Reference to the file the user picked in the upload step.

    Only metadata is kept; the workflow never reads the file's bytes.
    """
    name: str
    size: int = 0
    mime_type: Optional[str] = None


class AnalysisResult(BaseModel):
    """
    Outcome of the analysis step.

    Field names are snake_case in Python; the camelCase aliases match the
    keys used when the record is serialized for display or export.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_rows: int = Field(alias="totalRows")
    total_columns: int = Field(alias="totalColumns")
    null_counts: dict[str, int] = Field(default_factory=dict, alias="nullCounts")
    duplicate_rows: int = Field(0, alias="duplicateRows")
    data_types: dict[str, str] = Field(default_factory=dict, alias="dataTypes")
    schema_mismatches: list[str] = Field(default_factory=list, alias="schemaMismatches")

    @property
    def total_nulls(self) -> int:
        return sum(self.null_counts.values())

    @property
    def total_cells(self) -> int:
        return self.total_rows * self.total_columns


class RemediationOption(BaseModel):
    """
    One entry of the remediation checklist.

    config: free-form settings, e.g. {"method": "mean"} for imputation
    """
    id: str
    label: str
    description: str
    category: RemediationCategory
    impact: Impact
    selected: bool = False
    config: Optional[dict[str, Any]] = None
