import datetime as _dt
from typing import Optional


def _format(ts: _dt.datetime) -> str:
    return ts.isoformat(timespec='microseconds').replace('+00:00', 'Z')


def utc_now_iso() -> str:
    """Returns the current UTC time in ISO 8601 format."""
    return _format(_dt.datetime.now(_dt.timezone.utc))


def parse_timestamp(value: Optional[str]) -> Optional[_dt.datetime]:
    """Parse stored timestamps; naive values (seed data) are taken as UTC."""
    if not value:
        return None
    try:
        ts = _dt.datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=_dt.timezone.utc)
    return ts


def advance_timestamp(previous: Optional[str]) -> str:
    """Current UTC time, strictly later than previous."""
    now = _dt.datetime.now(_dt.timezone.utc)
    prev = parse_timestamp(previous)
    if prev is not None and now <= prev:
        now = prev + _dt.timedelta(microseconds=1)
    return _format(now)


def parse_date(value) -> Optional[_dt.date]:
    """Strict YYYY-MM-DD, optionally followed by a valid 'T' time part."""
    if isinstance(value, _dt.datetime):
        return value.date()
    if isinstance(value, _dt.date):
        return value
    if not value:
        return None
    text = str(value).strip()
    if 'T' in text:
        ts = parse_timestamp(text)
        text = text.split('T', 1)[0] if ts is not None else ''
    if len(text) != 10:
        return None
    try:
        return _dt.datetime.strptime(text, '%Y-%m-%d').date()
    except ValueError:
        return None


def today_iso(offset_days: int = 0) -> str:
    return (_dt.date.today() + _dt.timedelta(days=offset_days)).isoformat()


def format_short_date(value) -> str:
    """'Jun 1' style label used on cards."""
    d = parse_date(value)
    if d is None:
        return 'Not set'
    return f"{d.strftime('%b')} {d.day}"


def format_submission(value) -> str:
    ts = parse_timestamp(value)
    if ts is None:
        return '—'
    return ts.strftime('%d %b %Y, %I:%M %p')
