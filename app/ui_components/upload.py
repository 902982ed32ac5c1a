"""File upload and data preview components."""
import streamlit as st

from remediation_studio.models import FileHandle
from remediation_studio.preview import build_preview, preview_frame, preview_styles

ACCEPTED_TYPES = ["csv", "xlsx", "xls"]


def render_file_upload(selected: FileHandle = None):
    """
    Render the file picker.

    Only the file's metadata is captured; its contents are never read.

    Returns:
        A FileHandle for the newly picked file, or None.
    """
    uploaded = st.file_uploader(
        "Choose a CSV or Excel file",
        type=ACCEPTED_TYPES,
        key="upload_file",
    )
    if uploaded is not None:
        handle = FileHandle(name=uploaded.name, size=uploaded.size, mime_type=uploaded.type)
        st.success(f"Selected **{handle.name}** ({handle.size:,} bytes)")
        return handle
    if selected is not None:
        st.info(f"Current file: **{selected.name}**")
    return None


def render_data_preview(file: FileHandle = None, rows=None):
    """Render up to 5 preview rows, marking NULLs and suspicious emails."""
    table = build_preview(file, rows)
    if table is None:
        return

    st.markdown("**Data Preview**")
    st.caption(table.caption)

    if table.is_empty:
        st.info("No data to preview")
        return

    frame = preview_frame(table)
    styles = preview_styles(table)
    st.dataframe(
        frame.style.apply(lambda _: styles, axis=None),
        hide_index=True,
        width="stretch",
    )
