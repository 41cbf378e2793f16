"""
This package provides a collection of reusable UI components for the admin panels.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like CSS injectors, badges and toasts.
- `cards`: Record cards and the read-only preview panel.
- `record_form`: The schema-driven create/edit form.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    status_badge,
    tag_chip,
    notify,
)

from .cards import (
    record_card,
    record_preview,
)

from . import record_form

import pandas as pd
import streamlit as st


def records_table(records, columns):
    """Compact table layout of a record list."""
    if not records:
        st.caption("No records to display.")
        return
    df = pd.DataFrame(records)
    cols = [c for c in columns if c in df.columns]
    st.dataframe(df[cols], width="stretch", hide_index=True)
