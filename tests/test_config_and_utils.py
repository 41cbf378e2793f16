import datetime as dt

from config import get_config
from utils.dates import advance_timestamp, format_short_date, parse_date, parse_timestamp
from utils.ids import next_sequential_id, timestamp_id


def test_config_reads_env(monkeypatch, tmp_path):
    monkeypatch.setenv('ADMIN_DATA_DIR', str(tmp_path))
    monkeypatch.setenv('ADMIN_LOG_LEVEL', 'debug')
    monkeypatch.setenv('ADMIN_REQUIRE_LOGIN', 'false')
    monkeypatch.setenv('ADMIN_SIMULATED_DELAY', 'not-a-number')
    cfg = get_config()
    assert cfg.data_dir == str(tmp_path)
    assert cfg.log_level == 'DEBUG'
    assert cfg.require_login is False
    assert cfg.simulated_delay_seconds == 1.2


def test_timestamp_id_skips_taken_values(monkeypatch):
    monkeypatch.setattr('utils.ids.time.time', lambda: 1700000000.0)
    assert timestamp_id([1, 2]) == 1700000000000
    assert timestamp_id([1700000000000]) == 1700000000001


def test_next_sequential_id():
    assert next_sequential_id([]) == 1
    assert next_sequential_id([1, 7, 3]) == 8


def test_advance_timestamp_moves_past_future_value():
    future = (dt.datetime.now(dt.timezone.utc) + dt.timedelta(days=1)).isoformat()
    assert parse_timestamp(advance_timestamp(future)) > parse_timestamp(future)


def test_format_short_date():
    assert format_short_date('2024-06-01') == 'Jun 1'
    assert format_short_date(None) == 'Not set'


def test_parse_date_requires_full_iso_date():
    assert parse_date('2025-03-09') == dt.date(2025, 3, 9)
    assert parse_date('2025-03-09T10:00:00.000000Z') == dt.date(2025, 3, 9)
    assert parse_date('2025-03-09oops') is None
    assert parse_date('2025-03-09Tlater') is None
    assert parse_date('2025-3-9') is None
    assert parse_date('20250309') is None
