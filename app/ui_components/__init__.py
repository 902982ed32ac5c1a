"""UI components for the Data Remediation Studio."""
from .header import render_page_header, render_section_toggle
from .upload import render_file_upload, render_data_preview
from .analysis_panel import render_analysis_panel, render_null_chart
from .summary_panel import render_summary_panel
from .remediation_panel import render_remediation_panel
from .export_panel import render_export_panel

__all__ = [
    "render_page_header",
    "render_section_toggle",
    "render_file_upload",
    "render_data_preview",
    "render_analysis_panel",
    "render_null_chart",
    "render_summary_panel",
    "render_remediation_panel",
    "render_export_panel",
]
