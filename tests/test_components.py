from unittest.mock import patch, MagicMock


def _base(monkeypatch, st_mock):
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from ui.components import base
    monkeypatch.setattr(base, "st", st_mock)
    return base


def test_base_css_is_emitted_on_every_run(monkeypatch):
    """
    Streamlit drops elements a rerun does not emit, so the styles must be
    written each time, not once per process.
    """
    st_mock = MagicMock()
    base = _base(monkeypatch, st_mock)
    base.inject_base_css()
    base.inject_base_css()
    assert st_mock.markdown.call_count == 2
    assert "<style>" in st_mock.markdown.call_args[0][0]


def test_status_badge_colour_classes(monkeypatch):
    base = _base(monkeypatch, MagicMock())
    assert base.status_badge("active", "Active") == '<span class="badge green">Active</span>'
    assert 'class="badge yellow"' in base.status_badge("unknown")


def test_records_table_stretches_to_container(monkeypatch):
    st_mock = MagicMock()
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        import ui.components as components
    monkeypatch.setattr(components, "st", st_mock)
    components.records_table([{"id": 1, "title": "Launch Sale", "extra": "x"}], ["id", "title"])
    args, kwargs = st_mock.dataframe.call_args
    assert list(args[0].columns) == ["id", "title"]
    assert kwargs == {"width": "stretch", "hide_index": True}
