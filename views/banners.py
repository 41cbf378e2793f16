import datetime as dt

import streamlit as st

from services.controller import ViewController
from utils.dates import parse_date
from views.records import render_panel

PAGE_KEY = 'banners'


def _live_count(records) -> int:
    """Active, visible banners whose schedule covers today."""
    today = dt.date.today()
    live = 0
    for b in records:
        start, end = parse_date(b.get('startDate')), parse_date(b.get('endDate'))
        if b.get('status') == 'active' and b.get('isVisible') and start and end and start <= today <= end:
            live += 1
    return live


def view(controller: ViewController):
    st.caption(f"Live on the website today: {_live_count(controller.store.records)}")
    render_panel(controller, PAGE_KEY)
