import streamlit as st

from services.controller import ViewController
from views.records import render_panel

PAGE_KEY = 'projects'


def view(controller: ViewController):
    featured = sum(1 for p in controller.store.records if p.get('featured'))
    st.caption(f"Featured on the website: {featured}")
    render_panel(controller, PAGE_KEY)
