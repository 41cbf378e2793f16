import datetime as dt

from domain.entities import BANNER, CONTACT, PROJECT
from services.controller import FORM, LIST, ViewController
from services.panels import build_controllers
from services.store import RecordStore


def make_controller(schema=BANNER):
    return ViewController(RecordStore(schema))


def test_no_action_resolves_to_list():
    state = make_controller().resolve({})
    assert state.mode == LIST
    assert state.filter_value is None


def test_create_action_resolves_to_form():
    state = make_controller().resolve({'action': 'create', 'filter': 'active'})
    assert (state.mode, state.action, state.filter_value) == (FORM, 'create', 'active')


def test_edit_with_known_id_resolves_to_form():
    state = make_controller().resolve({'action': 'edit', 'id': '2'})
    assert (state.mode, state.action, state.record_id) == (FORM, 'edit', 2)


def test_edit_with_unknown_or_missing_id_falls_back_to_list():
    ctrl = make_controller()
    assert ctrl.resolve({'action': 'edit', 'id': '999'}).mode == LIST
    assert ctrl.resolve({'action': 'edit'}).mode == LIST


def test_list_view_titles_and_filter_counts():
    model = make_controller().list_view('scheduled')
    assert model.title == 'Scheduled Banners'
    assert model.subtitle == '1 banner found'
    assert [(f.label, f.count, f.active) for f in model.filters] == [
        ('All', 2, False), ('Active', 1, False), ('Inactive', 0, False), ('Scheduled', 1, True)]
    assert [c.title for c in model.cards] == ['Project Showcase']


def test_list_view_empty_filter_message():
    model = make_controller().list_view('inactive')
    assert model.cards == []
    assert model.subtitle == '0 banners found'
    assert model.empty_message.startswith('Try changing your filter')


def test_card_view_model():
    card = make_controller().card(RecordStore(BANNER).get(1))
    assert card.tag == 'Homepage'
    assert card.status_label == 'Active'
    assert card.toggle_label == 'Deactivate'
    assert ('Schedule', 'Jun 1 - Jun 30') in card.meta


def test_contact_cards_offer_mark_read_only_when_new():
    ctrl = make_controller(CONTACT)
    cards = {c.id: c for c in ctrl.list_view().cards}
    assert cards[1].can_mark_read is True
    assert cards[2].can_mark_read is False
    assert cards[1].toggle_label is None
    assert not any(c.can_mark_read for c in make_controller().list_view().cards)


def test_create_form_defaults():
    form = make_controller().form_view('create')
    assert form.submit_label == 'Create Banner'
    assert form.values['status'] == 'active'
    assert form.values['startDate'] == dt.date.today().isoformat()
    assert form.values['endDate'] == (dt.date.today() + dt.timedelta(days=1)).isoformat()


def test_edit_form_prefilled_and_missing_record():
    ctrl = make_controller(PROJECT)
    form = ctrl.form_view('edit', 1)
    assert form.values['title'] == 'Luxury Residential Complex'
    assert form.values['compliance'] == 'RERA: Registered'
    assert ctrl.form_view('edit', 404) is None


def test_collect_converts_widget_values():
    ctrl = make_controller(PROJECT)
    fields = ctrl.collect({
        'title': '  Metro Depot ', 'startDate': dt.date(2025, 3, 1),
        'floors': 4.0, 'featured': 1, 'compliance': 'RERA: Registered\n\nISO 14001',
    })
    assert fields['title'] == 'Metro Depot'
    assert fields['startDate'] == '2025-03-01'
    assert fields['floors'] == 4
    assert fields['featured'] is True
    assert [c['title'] for c in fields['compliance']] == ['RERA', 'ISO 14001']


def test_unchecked_visibility_is_kept():
    ctrl = make_controller()
    fields = ctrl.collect({'title': 'Hidden', 'page': 'about', 'isVisible': False,
                           'startDate': '2025-01-01', 'endDate': '2025-01-02'})
    result = ctrl.submit('create', None, fields)
    assert result.record['isVisible'] is False


def test_submit_reports_first_error_and_saves_nothing():
    ctrl = make_controller()
    result = ctrl.submit('create', None, {'startDate': '2025-01-02', 'endDate': '2025-01-01'})
    assert not result.ok
    assert result.level == 'error'
    assert result.message == 'Banner title is required'
    assert len(ctrl.store.list()) == 2


def test_submit_create_and_update():
    ctrl = make_controller()
    created = ctrl.submit('create', None, {'title': 'Launch Sale', 'page': 'homepage',
                                           'startDate': '2025-01-01', 'endDate': '2025-01-31'})
    assert created.ok and created.message == 'Banner created successfully!'
    updated = ctrl.submit('edit', created.record['id'], {**created.record, 'title': 'Launch Sale II'})
    assert updated.ok and updated.record['title'] == 'Launch Sale II'
    missing = ctrl.submit('edit', 999, {'title': 'x', 'page': 'about',
                                        'startDate': '2025-01-01', 'endDate': '2025-01-01'})
    assert not missing.ok


def test_delete_toggle_and_mark_read_results():
    ctrl = make_controller()
    assert ctrl.toggle_status(1).message == 'Banner deactivated'
    assert ctrl.delete(1).ok
    assert not ctrl.delete(1).ok

    projects = make_controller(PROJECT)
    assert projects.toggle_status(1).message == 'Project held'

    contacts = make_controller(CONTACT)
    assert contacts.mark_as_read(1).message == 'Enquiry marked as read'
    assert not contacts.mark_as_read(99).ok
    assert not ctrl.mark_as_read(2).ok


def test_navigation_params_preserve_filter():
    ctrl = make_controller()
    ctrl.resolve({'filter': 'active'})
    assert ctrl.form_params('edit', 5) == {'action': 'edit', 'id': '5', 'filter': 'active'}
    assert ctrl.list_params('active') == {'filter': 'active'}
    assert ctrl.list_params(None) == {}


def test_build_controllers_one_per_entity():
    controllers = build_controllers()
    assert set(controllers) == {'banner', 'career', 'contact', 'project'}
    assert controllers['contact'].schema is CONTACT
