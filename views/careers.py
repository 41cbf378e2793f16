import streamlit as st

from services.controller import ViewController
from views.records import render_panel

PAGE_KEY = 'careers'


def view(controller: ViewController):
    departments = {c.get('department') for c in controller.store.records if c.get('status') == 'active'}
    st.caption(f"Departments hiring: {len(departments - {None, ''})}")
    render_panel(controller, PAGE_KEY)
