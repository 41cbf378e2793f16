import streamlit as st
from typing import Any, Dict, Optional

from .base import status_badge, tag_chip


def record_card(card, key_prefix: str) -> Optional[str]:
    """
    Displays one record card with its action buttons.

    Returns the name of the clicked action ('preview', 'edit', 'toggle',
    'read', 'delete') or None.
    """
    clicked = None
    with st.container(border=True):
        top_cols = st.columns([5, 2])
        with top_cols[0]:
            st.markdown(f"**{card.title}**")
            if card.tag:
                st.markdown(tag_chip(card.tag), unsafe_allow_html=True)
        with top_cols[1]:
            if card.status:
                st.markdown(status_badge(card.status, card.status_label), unsafe_allow_html=True)

        for label, value in card.meta:
            st.markdown(f"<span class='meta-label'>{label}:</span> {value}", unsafe_allow_html=True)
        if card.excerpt:
            st.caption(card.excerpt)

        actions = [("preview", "Preview")]
        if card.can_mark_read:
            actions.append(("read", "Mark Read"))
        actions.append(("edit", "Edit"))
        if card.toggle_label:
            actions.append(("toggle", card.toggle_label))
        actions.append(("delete", "Delete"))
        cols = st.columns(len(actions))
        for col, (name, label) in zip(cols, actions):
            if col.button(label, key=f"{key_prefix}_{name}_{card.id}"):
                clicked = name
    return clicked


def record_preview(record: Dict[str, Any], fields):
    """Read-only detail listing for the preview panel."""
    with st.container(border=True):
        for spec in fields:
            value = record.get(spec.name)
            if spec.to_form is not None:
                value = spec.to_form(value)
            if spec.options and not isinstance(value, list):
                value = next((label for v, label in spec.options if v == value), value)
            elif isinstance(value, list):
                value = ", ".join(str(v) for v in value) or "—"
            elif isinstance(value, bool):
                value = "Yes" if value else "No"
            st.markdown(f"**{spec.label}:** {value if value not in (None, '') else '—'}")
        st.caption(f"Created {record.get('createdAt', '—')} | Updated {record.get('updatedAt', '—')}")
