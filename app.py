import logging

import streamlit as st
import datetime as dt
from urllib.parse import unquote

from config import get_config
from services.panels import build_controllers

# Import the page rendering functions from the view modules
from views import banners, careers, contacts, projects, login

# --- Page Registry ---
# Maps a page key to its label, rendering function, and the entity whose
# controller the page receives.
PAGE_REGISTRY = {
    "banners": {
        "label": "🖼️ Banners",
        "render_func": banners.view,
        "entity": "banner",
    },
    "careers": {
        "label": "💼 Careers",
        "render_func": careers.view,
        "entity": "career",
    },
    "contacts": {
        "label": "✉️ Contacts",
        "render_func": contacts.view,
        "entity": "contact",
    },
    "projects": {
        "label": "🏗️ Projects",
        "render_func": projects.view,
        "entity": "project",
    },
}

LOGIN_PAGE = "login"


def get_controllers():
    """Per-session store/controller instances, created once per browser session."""
    if 'controllers' not in st.session_state:
        st.session_state.controllers = build_controllers()
    return st.session_state.controllers


def resolve_page(raw_param) -> str:
    raw = unquote(raw_param) if isinstance(raw_param, str) else ''
    return raw if raw in PAGE_REGISTRY else next(iter(PAGE_REGISTRY))


def main():
    """
    Main application router.

    Reads the `page` query parameter, shows the login screen when the session
    is not authenticated, and renders the selected panel with its controller.
    """
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    st.set_page_config(page_title="ConstructPro Admin", layout="wide")

    if cfg.require_login and not st.session_state.get('authenticated'):
        login.view()
        return

    controllers = get_controllers()
    page_key = resolve_page(st.query_params.get('page'))

    # --- Sidebar ---
    st.sidebar.title("ConstructPro")
    page_keys = list(PAGE_REGISTRY.keys())
    page_labels = [v["label"] for v in PAGE_REGISTRY.values()]
    selected_label = st.sidebar.radio(
        "Menu",
        page_labels,
        index=page_keys.index(page_key),
    )
    selected_key = page_keys[page_labels.index(selected_label)]
    if selected_key != page_key:
        # Switching panels drops action/id/filter
        st.query_params.from_dict({'page': selected_key})
        st.rerun()

    if cfg.require_login:
        st.sidebar.markdown("---")
        st.sidebar.caption(st.session_state.get('user_email', ''))
        if st.sidebar.button("Logout"):
            login.logout()

    # --- Page Rendering ---
    page = PAGE_REGISTRY[page_key]
    page["render_func"](controllers[page["entity"]])

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Data dir: {cfg.data_dir} | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
