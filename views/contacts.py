import streamlit as st

from services.controller import ViewController
from views.records import render_panel

PAGE_KEY = 'contacts'


def view(controller: ViewController):
    unread = sum(1 for c in controller.store.records if c.get('status') == 'new')
    st.caption(f"Unread enquiries: {unread}")
    render_panel(controller, PAGE_KEY)
