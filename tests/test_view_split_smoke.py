from unittest.mock import patch, MagicMock

# Mock streamlit before importing the app
st_mock = MagicMock()


def _registry():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import PAGE_REGISTRY
    return PAGE_REGISTRY


def test_page_registry_structure():
    """
    Tests that the PAGE_REGISTRY has the correct structure.
    """
    registry = _registry()
    assert isinstance(registry, dict)
    for key, value in registry.items():
        assert "label" in value
        assert "render_func" in value
        assert "entity" in value
        assert callable(value["render_func"])


def test_every_panel_has_a_schema():
    """
    Each page's entity must have a controller built for it.
    """
    from domain.entities import SCHEMAS
    registry = _registry()
    assert sorted(v["entity"] for v in registry.values()) == sorted(SCHEMAS)
    assert sorted(registry) == ["banners", "careers", "contacts", "projects"]


def test_unknown_page_param_falls_back_to_first_panel():
    with patch.dict("sys.modules", {"streamlit": st_mock}):
        from app import resolve_page
    assert resolve_page("projects") == "projects"
    assert resolve_page("nope") == "banners"
    assert resolve_page(None) == "banners"
