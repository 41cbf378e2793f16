"""Shared list/form page used by every admin panel.

Each panel module passes in its own ViewController; the page reads the
`action`, `id` and `filter` query params, renders the list or the form, and
routes button clicks back into the controller.
"""
import streamlit as st
from typing import Dict, Optional

from services.controller import FORM, ActionResult, ViewController
from ui import components
from ui.components import record_form


def _flash_key(page_key: str) -> str:
    return f"{page_key}_flash"


def _flash(page_key: str, result: ActionResult):
    # Shown after the rerun triggered by navigation
    st.session_state[_flash_key(page_key)] = result


def _show_flash(page_key: str):
    result = st.session_state.pop(_flash_key(page_key), None)
    if result is not None:
        components.notify(result)


def navigate(page_key: str, params: Optional[Dict[str, str]] = None):
    st.query_params.from_dict({'page': page_key, **(params or {})})
    st.rerun()


def render_panel(controller: ViewController, page_key: str):
    components.inject_base_css()
    _show_flash(page_key)
    state = controller.resolve(st.query_params.to_dict())
    if state.mode == FORM:
        _render_form(controller, page_key, state)
    else:
        _render_list(controller, page_key, state.filter_value)


def _render_form(controller: ViewController, page_key: str, state):
    form = controller.form_view(state.action, state.record_id)
    if form is None:
        navigate(page_key, controller.list_params(state.filter_value))
        return
    action, raw = record_form.render(form, key_prefix=f"{page_key}_{state.action}_{state.record_id or 'new'}")
    if action == 'cancel':
        navigate(page_key, controller.list_params(state.filter_value))
    elif action == 'save':
        result = controller.submit(state.action, state.record_id, controller.collect(raw))
        if not result.ok:
            # Validation failure: stay on the form, nothing saved
            components.notify(result)
            st.error(result.message)
            return
        _flash(page_key, result)
        navigate(page_key, controller.list_params(state.filter_value))


def _render_list(controller: ViewController, page_key: str, filter_value: Optional[str]):
    model = controller.list_view(filter_value)
    schema = controller.schema

    head_left, head_right = st.columns([4, 1])
    with head_left:
        st.header(model.title)
        st.caption(model.subtitle)
    with head_right:
        if model.add_label and st.button(model.add_label, type="primary", key=f"{page_key}_add"):
            navigate(page_key, controller.form_params('create'))

    filter_cols = st.columns(len(model.filters))
    for col, btn in zip(filter_cols, model.filters):
        label = f"{btn.label} ({btn.count})"
        if col.button(label, key=f"{page_key}_filter_{btn.value}",
                      type="primary" if btn.active else "secondary"):
            navigate(page_key, controller.list_params(btn.value))

    _render_pending_delete(controller, page_key, filter_value)
    _render_preview(controller, page_key)

    if not model.cards:
        st.info(f"No {schema.plural_noun} found. {model.empty_message}")
    elif st.toggle("Table view", key=f"{page_key}_table"):
        ids = {c.id for c in model.cards}
        rows = [r for r in controller.store.records if r.get('id') in ids]
        columns = ['id', schema.title_field, schema.filter_field] + [
            f.name for f in schema.form_fields if f.kind in ('select', 'date')]
        components.records_table(rows, list(dict.fromkeys(columns)))
    else:
        grid = st.columns(2)
        for i, card in enumerate(model.cards):
            with grid[i % 2]:
                clicked = components.record_card(card, key_prefix=page_key)
            if clicked:
                _handle_card_action(controller, page_key, clicked, card.id, filter_value)

    _render_data_tools(controller, page_key, filter_value)


def _handle_card_action(controller: ViewController, page_key: str, action: str, record_id: int, filter_value):
    if action == 'edit':
        st.session_state.pop(f"{page_key}_preview", None)
        navigate(page_key, controller.form_params('edit', record_id))
    elif action == 'preview':
        st.session_state[f"{page_key}_preview"] = record_id
        st.rerun()
    elif action == 'delete':
        st.session_state[f"{page_key}_pending_delete"] = record_id
        st.rerun()
    elif action in ('toggle', 'read'):
        handler = controller.toggle_status if action == 'toggle' else controller.mark_as_read
        result = handler(record_id)
        if result.ok:
            _flash(page_key, result)
            navigate(page_key, controller.list_params(filter_value))


def _render_pending_delete(controller: ViewController, page_key: str, filter_value):
    key = f"{page_key}_pending_delete"
    record_id = st.session_state.get(key)
    if record_id is None:
        return
    record = controller.store.get(record_id)
    if record is None:
        del st.session_state[key]
        return
    title = record.get(controller.schema.title_field) or record_id
    with st.container(border=True):
        st.warning(f"Delete '{title}'? This action cannot be undone.")
        c1, c2 = st.columns(2)
        if c1.button("Delete", type="primary", key=f"{page_key}_confirm_delete"):
            result = controller.delete(record_id)
            del st.session_state[key]
            if result.ok:
                _flash(page_key, result)
            navigate(page_key, controller.list_params(filter_value))
        if c2.button("Cancel", key=f"{page_key}_cancel_delete"):
            del st.session_state[key]
            st.rerun()


def _render_preview(controller: ViewController, page_key: str):
    key = f"{page_key}_preview"
    record_id = st.session_state.get(key)
    if record_id is None:
        return
    record = controller.store.get(record_id)
    if record is None:
        del st.session_state[key]
        return
    with st.expander(f"Preview: {record.get(controller.schema.title_field, record_id)}", expanded=True):
        components.record_preview(record, controller.schema.form_fields)
        c1, c2 = st.columns(2)
        if c1.button("Edit", key=f"{page_key}_preview_edit"):
            del st.session_state[key]
            navigate(page_key, controller.form_params('edit', record_id))
        if c2.button("Close", key=f"{page_key}_preview_close"):
            del st.session_state[key]
            st.rerun()


def _render_data_tools(controller: ViewController, page_key: str, filter_value):
    schema = controller.schema
    with st.expander("💾 Data tools"):
        st.download_button(
            f"Download {schema.plural_noun}.csv", controller.store.export_csv(),
            f"{schema.plural_noun}.csv", "text/csv", key=f"{page_key}_export")
        st.warning(f"Resetting replaces all {schema.plural_noun} with the sample data.")
        if st.checkbox("I understand, reset to sample data", key=f"{page_key}_reset_ack"):
            if st.button("Reset", type="primary", key=f"{page_key}_reset"):
                _flash(page_key, controller.reset())
                navigate(page_key, controller.list_params(filter_value))
