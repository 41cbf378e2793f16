import streamlit as st

from config import THEME

GREEN = THEME["success"]
YELLOW = THEME["warning"]
RED = THEME["danger"]
BLUE = THEME["info"]
CHIP_BG = THEME["accent"]

_STATUS_COLORS = {
    "active": "green", "ongoing": "green", "completed": "blue", "read": "gray",
    "scheduled": "yellow", "upcoming": "yellow", "new": "blue",
    "inactive": "red", "on-hold": "red",
}


def inject_base_css():
    """Badge and tag styles; must be emitted on every script run."""
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.red {{background:{RED};}}
        .badge.blue {{background:{BLUE};}}
        .badge.gray {{background:#6b7280;}}
        .tag {{
            display:inline-block; padding:2px 8px; border-radius:6px; font-size:12px;
            background:{THEME["chip_bg"]}; color:{THEME["primary"]};
        }}
        .meta-label {{color:{THEME["text_secondary"]}; font-size:12px;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(status: str, label: str = None) -> str:
    cls = _STATUS_COLORS.get((status or "").lower(), "yellow")
    return f'<span class="badge {cls}">{label or status}</span>'


def tag_chip(label: str) -> str:
    return f'<span class="tag">{label}</span>'


def notify(result):
    """Show an ActionResult as a transient toast."""
    icons = {"success": "✅", "error": "⚠️", "warning": "⚠️", "info": "ℹ️"}
    st.toast(result.message, icon=icons.get(result.level, "ℹ️"))
