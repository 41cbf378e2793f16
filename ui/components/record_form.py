import streamlit as st
from typing import Any, Dict, Optional, Tuple

from utils.dates import parse_date


def _index_of(options, value) -> int:
    values = [v for v, _ in options]
    return values.index(value) if value in values else 0


def _widget(spec, value: Any, key: str):
    label = f"{spec.label} *" if spec.required else spec.label
    if spec.kind == 'textarea':
        return st.text_area(label, value=str(value or ''), key=key, help=spec.help)
    if spec.kind in ('select', 'radio'):
        values = [v for v, _ in spec.options]
        labels = dict(spec.options)
        widget = st.selectbox if spec.kind == 'select' else st.radio
        extra = {'horizontal': True} if spec.kind == 'radio' else {}
        return widget(label, values, index=_index_of(spec.options, value),
                      format_func=lambda v: labels.get(v, str(v)), key=key, **extra)
    if spec.kind == 'multiselect':
        values = [v for v, _ in spec.options]
        labels = dict(spec.options)
        default = [v for v in (value or []) if v in values]
        return st.multiselect(label, values, default=default,
                              format_func=lambda v: labels.get(v, str(v)), key=key)
    if spec.kind == 'date':
        return st.date_input(label, value=parse_date(value), key=key)
    if spec.kind == 'number':
        try:
            initial = int(value or 0)
        except (TypeError, ValueError):
            initial = 0
        return st.number_input(label, min_value=0, value=initial, step=1, key=key)
    if spec.kind == 'checkbox':
        return st.checkbox(label, value=bool(value), key=key)
    return st.text_input(label, value=str(value or ''), key=key, help=spec.help)


def render(form, key_prefix: str) -> Tuple[Optional[str], Dict[str, Any]]:
    """
    Renders a create/edit form from a FormViewModel.

    Args:
        form: The FormViewModel (fields + prefilled values).
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        Tuple[Optional[str], Dict[str, Any]]: ('save' | 'cancel' | None, raw widget values).
    """
    raw: Dict[str, Any] = {}
    with st.form(f"form_{key_prefix}"):
        st.subheader(form.title)
        left, right = st.columns(2)
        for i, spec in enumerate(form.fields):
            target = left if spec.kind in ('textarea', 'multiselect') or i % 2 == 0 else right
            with target:
                raw[spec.name] = _widget(spec, form.values.get(spec.name), f"{key_prefix}_{spec.name}")

        c1, c2 = st.columns(2)
        saved = c1.form_submit_button(form.submit_label, type="primary")
        cancelled = c2.form_submit_button("Cancel")

    if cancelled:
        return 'cancel', raw
    if saved:
        return 'save', raw
    return None, raw
