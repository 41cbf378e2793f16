import time

import streamlit as st

from config import get_config
from services import auth


def view(on_success_page: str = 'banners'):
    """
    Renders the login / registration screen.

    Only field-level checks are performed; a successful login marks the
    session as authenticated and forwards to the banner panel.
    """
    cfg = get_config()
    st.header("ConstructPro Admin")
    login_tab, register_tab = st.tabs(["Login", "Register"])

    with login_tab:
        with st.form("login_form"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Login", type="primary")
        if submitted:
            result = auth.validate_login(email, password)
            if not result.is_valid:
                st.error(result.first_error)
            else:
                with st.spinner("Logging in..."):
                    time.sleep(cfg.simulated_delay_seconds)
                st.session_state.authenticated = True
                st.session_state.user_email = email.strip()
                st.query_params.from_dict({'page': on_success_page})
                st.rerun()

    with register_tab:
        with st.form("register_form"):
            name = st.text_input("Full Name")
            reg_email = st.text_input("Email", key="register_email")
            reg_password = st.text_input("Password", type="password", key="register_password")
            confirm = st.text_input("Confirm Password", type="password")
            registered = st.form_submit_button("Create Account")
        if registered:
            result = auth.validate_registration(name, reg_email, reg_password, confirm)
            if not result.is_valid:
                st.error(result.first_error)
            else:
                with st.spinner("Creating account..."):
                    time.sleep(cfg.simulated_delay_seconds)
                st.success("Account created! You can now log in.")


def logout():
    for key in ('authenticated', 'user_email'):
        st.session_state.pop(key, None)
    st.query_params.from_dict({'page': 'login'})
    st.rerun()
