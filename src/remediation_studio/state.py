from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .models import AnalysisResult, FileHandle, RemediationOption

logger = logging.getLogger(__name__)


class Section(str, Enum):
    UPLOAD = "upload"
    ANALYSIS = "analysis"
    SUMMARY = "summary"
    REMEDIATION = "remediation"
    EXPORT = "export"


SECTION_TITLES = {
    Section.UPLOAD: "1. Upload Data File",
    Section.ANALYSIS: "2. Data Analysis",
    Section.SUMMARY: "3. AI Quality Summary",
    Section.REMEDIATION: "4. Data Remediation",
    Section.EXPORT: "5. Export Results",
}

# Sections that stay hidden until an analysis result exists.
ANALYSIS_GATED = (Section.SUMMARY, Section.REMEDIATION, Section.EXPORT)


class AppState(BaseModel):
    """
    Page-level state owned by the top-level controller.

    selected_file / analysis_result / remediation_applied only ever move
    forward for the lifetime of the page; the collapse flags toggle freely.
    """
    selected_file: Optional[FileHandle] = None
    analysis_result: Optional[AnalysisResult] = None
    remediation_applied: bool = False
    applied_options: list[RemediationOption] = Field(default_factory=list)
    collapsed: dict[Section, bool] = Field(default_factory=lambda: {s: False for s in Section})

    @property
    def has_file(self) -> bool:
        return self.selected_file is not None

    @property
    def has_analysis(self) -> bool:
        return self.analysis_result is not None

    @property
    def export_enabled(self) -> bool:
        return self.remediation_applied

    def select_file(self, handle: Optional[FileHandle]) -> None:
        # Clearing the uploader does not un-select the file.
        if handle is None:
            return
        logger.info("File selected: %s", handle.name)
        self.selected_file = handle

    def on_analysis_complete(self, result: AnalysisResult) -> None:
        self.analysis_result = result

    def on_remediation_applied(self, options: list[RemediationOption]) -> None:
        self.applied_options = list(options)
        self.remediation_applied = True

    def toggle_section(self, section: Section | str) -> bool:
        section = Section(section)
        self.collapsed[section] = not self.collapsed.get(section, False)
        return self.collapsed[section]

    def is_collapsed(self, section: Section | str) -> bool:
        return self.collapsed.get(Section(section), False)

    def visible_sections(self) -> list[Section]:
        return [s for s in Section if self.has_analysis or s not in ANALYSIS_GATED]
