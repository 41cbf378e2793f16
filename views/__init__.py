"""View modules for manual routing.

This project uses a custom router in `app.py` instead of Streamlit's automatic
multi-page system. Each admin panel lives under `views/` and exposes a
`view(controller)` function; the shared list/form page is in `views/records.py`.

Add any new panel as a module with a `view()` callable, declare its schema in
`domain/entities.py`, and register it in `PAGE_REGISTRY` inside `app.py`.
"""
