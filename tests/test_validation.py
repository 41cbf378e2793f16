import pytest

from domain.entities import BANNER, CAREER, CONTACT, PROJECT
from services import auth
from services.store import RecordStore


def test_banner_requires_title_page_and_dates():
    result = RecordStore(BANNER).validate({'title': '   '})
    assert not result.is_valid
    assert result.errors == [
        'Banner title is required',
        'Page placement is required',
        'Start and end dates are required',
    ]


def test_end_before_start_is_rejected():
    result = RecordStore(CAREER).validate({
        'title': 'Surveyor', 'department': 'operations',
        'startDate': '2025-02-01', 'endDate': '2025-01-31'})
    assert result.errors == ['End date must be after start date']


def test_equal_dates_are_accepted():
    result = RecordStore(BANNER).validate({
        'title': 'One Day Only', 'page': 'services',
        'startDate': '2025-05-05', 'endDate': '2025-05-05'})
    assert result.is_valid
    assert result.errors == []


def test_project_uses_expected_completion():
    store = RecordStore(PROJECT)
    missing = store.validate({'title': 'Bridge', 'industry': 'infrastructure',
                              'startDate': '2025-01-01'})
    assert missing.errors == ['Start and completion dates are required']
    inverted = store.validate({'title': 'Bridge', 'industry': 'infrastructure',
                               'startDate': '2025-01-01', 'expectedCompletion': '2024-01-01'})
    assert inverted.errors == ['Completion date must be after start date']


def test_unparseable_dates_are_reported():
    result = RecordStore(BANNER).validate({
        'title': 'Odd', 'page': 'about', 'startDate': 'soon', 'endDate': '2025-01-01'})
    assert result.errors == ['Dates must use the YYYY-MM-DD format']


def test_contact_has_no_date_rule():
    result = RecordStore(CONTACT).validate({
        'fullName': 'Asha Rao', 'email': 'asha@example.com',
        'enquiryType': 'general', 'message': 'Hello'})
    assert result.is_valid


@pytest.mark.parametrize('email,password,expected', [
    ('', 'secret', 'Please fill in all fields'),
    ('admin@constructpro.in', '', 'Please fill in all fields'),
    ('admin@constructpro.in', 'secret', None),
])
def test_login_validation(email, password, expected):
    result = auth.validate_login(email, password)
    assert result.first_error == expected


def test_registration_validation():
    assert auth.validate_registration('', 'a@b.c', 'longpassword', 'longpassword').first_error == 'All fields are required'
    assert auth.validate_registration('Ana', 'a@b.c', 'short', 'short').first_error == 'Password must be at least 8 characters'
    assert auth.validate_registration('Ana', 'a@b.c', 'longpassword', 'different1').first_error == 'Passwords do not match'
    assert auth.validate_registration('Ana', 'a@b.c', 'longpassword', 'longpassword').is_valid


def test_dates_with_trailing_text_are_rejected():
    result = RecordStore(BANNER).validate({
        'title': 'x', 'page': 'about', 'startDate': '2025-01-01oops', 'endDate': '2025-01-02'})
    assert not result.is_valid
    assert result.errors == ['Dates must use the YYYY-MM-DD format']


def test_dates_with_time_part_are_accepted():
    result = RecordStore(CAREER).validate({
        'title': 'Surveyor', 'department': 'operations',
        'startDate': '2025-01-01T09:30:00Z', 'endDate': '2025-01-02'})
    assert result.is_valid
