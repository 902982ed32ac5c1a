"""Style utilities for consistent UI presentation."""
import streamlit as st

COLORS = {
    "primary": "#1E88E5",
    "secondary": "#6C757D",
    "success": "#28A745",
    "warning": "#FFC107",
    "critical": "#DC3545",
    "info": "#17A2B8",
    "light": "#F8F9FA",
    "dark": "#343A40",
}

SCORE_COLORS = {
    "good": COLORS["success"],
    "fair": COLORS["warning"],
    "poor": COLORS["critical"],
}

IMPACT_COLORS = {
    "high": COLORS["critical"],
    "medium": COLORS["primary"],
    "low": COLORS["secondary"],
}

ISSUE_ICONS = {
    "null": "🔴",
    "duplicate": "🟠",
    "schema": "🟠",
}


def styled_metric(label: str, value: str, color: str = "", description: str = ""):
    """Render a styled metric tile with an optional value colour and description."""
    value_color = color or COLORS["dark"]
    st.markdown(f"""
<div style="padding: 12px; background: {COLORS['light']}; border-radius: 8px; margin-bottom: 8px; text-align: center;">
    <div style="font-size: 1.5em; font-weight: 600; color: {value_color};">{value}</div>
    <div style="font-size: 0.85em; color: {COLORS['secondary']}; margin-top: 4px;">{label}</div>
    {"<div style='font-size: 0.75em; color: " + COLORS['secondary'] + "; margin-top: 4px;'>" + description + "</div>" if description else ""}
</div>
    """, unsafe_allow_html=True)


def badge(text: str, color: str = "") -> str:
    """Return HTML for a small pill badge."""
    bg = color or COLORS["secondary"]
    return f'<span style="background: {bg}; color: white; padding: 2px 8px; border-radius: 12px; font-size: 0.8em;">{text}</span>'


def issue_row(icon: str, text: str, badge_html: str):
    """Render one issue line: icon and text on the left, badge on the right."""
    st.markdown(f"""
<div style="display: flex; justify-content: space-between; align-items: center; padding: 8px 12px; margin: 6px 0; background: rgba(0,0,0,0.03); border-radius: 6px;">
    <span>{icon} {text}</span>
    {badge_html}
</div>
    """, unsafe_allow_html=True)
