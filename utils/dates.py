"""
Date helpers for Folio.

Parsing of metadata dates, ISO serialization and display labels.
"""

from datetime import date, datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

MONTH_ABBREVIATIONS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                       'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

# Hand-written sidecar dates accepted besides ISO-8601
WRITTEN_DATE_FORMATS = (
    '%Y/%m/%d',
    '%Y/%m/%d %H:%M',
    '%B %d, %Y',
    '%b %d, %Y',
    '%d %B %Y',
    '%d %b %Y',
)


def parse_date(value):
    """Parse a metadata date into an aware UTC datetime.

    Accepts ISO-8601 strings (date-only, date-time, 'Z' or offset suffix),
    the hand-written forms in WRITTEN_DATE_FORMATS ('2024/03/15',
    'March 15, 2024') and numbers as epoch milliseconds. Naive values are
    read as UTC.

    Returns:
        datetime or None if the value is empty or unparseable
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = _parse_written_date(text)
        if parsed is None:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _parse_written_date(text):
    for fmt in WRITTEN_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def to_iso(dt):
    """Serialize a datetime as YYYY-MM-DDTHH:MM:SS.mmmZ."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"


def timestamp_to_iso(seconds):
    """Convert a POSIX timestamp in seconds to an ISO string, None for 0."""
    if not seconds:
        return None
    return to_iso(datetime.fromtimestamp(seconds, tz=timezone.utc))


def ensure_iso_date(value):
    """Normalize any parseable date to an ISO string, else None."""
    parsed = parse_date(value)
    return to_iso(parsed) if parsed else None


def to_epoch_millis(value):
    """Epoch milliseconds for a parseable date, 0 otherwise."""
    parsed = parse_date(value)
    if parsed is None:
        return 0
    return (parsed - EPOCH) // timedelta(milliseconds=1)


def now_iso():
    return to_iso(datetime.now(timezone.utc))


def parse_compact_date(digits):
    """Parse YYYYMMDD into a date, None if it is not a real calendar date."""
    try:
        return date(int(digits[0:4]), int(digits[4:6]), int(digits[6:8]))
    except (ValueError, IndexError):
        return None


def format_short_date(d):
    """Format a date like 'Jan 5, 2024'."""
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}, {d.year}"


def format_month_label(value):
    """Format a parseable date like 'Jan 2024', '' otherwise."""
    parsed = parse_date(value)
    if parsed is None:
        return ''
    return f"{MONTH_ABBREVIATIONS[parsed.month - 1]} {parsed.year}"
