"""Data Remediation Studio engine.

Streamlit-free state and simulated steps behind the five-step UI in app/.
"""

from .analysis import SAMPLE_ANALYSIS, AnalysisPanel, quality_score
from .models import AnalysisResult, FileHandle, RemediationOption
from .state import AppState, Section
from .studio import Studio

__all__ = [
    "SAMPLE_ANALYSIS",
    "AnalysisPanel",
    "AnalysisResult",
    "AppState",
    "FileHandle",
    "RemediationOption",
    "Section",
    "Studio",
    "quality_score",
]
