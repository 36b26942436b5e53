import time
from datetime import date, datetime, timedelta, timezone

from progress_tracker.core.config import settings
from progress_tracker.core.constants import DATE_KEY_FORMAT


def now_millis() -> int:
    """Current time as epoch milliseconds."""
    return time.time_ns() // 1_000_000


def datetime_to_millis(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are local time)."""
    return int(dt.timestamp() * 1000)


def to_millis(value, tz_name: str | None = None) -> int:
    """Epoch milliseconds for an int, a datetime or a date.

    Naive datetimes are wall-clock time in the configured zone and a bare
    date means midnight at the start of that day, so
    `local_date(to_millis(d, tz), tz) == d`.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            if tz_name is None:
                tz_name = settings.timezone
            if tz_name and tz_name != "local":
                try:
                    from zoneinfo import ZoneInfo
                    value = value.replace(tzinfo=ZoneInfo(tz_name))
                except (KeyError, ValueError):
                    pass
        return datetime_to_millis(value)
    if isinstance(value, date):
        return to_millis(datetime(value.year, value.month, value.day), tz_name)
    return int(value)


def to_local_datetime(ms: int, tz_name: str | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime in the given tz.

    - If `tz_name` is None the configured `settings.timezone` is used.
    - 'local' means the system local timezone.
    - An IANA name (e.g., 'America/New_York') is resolved with zoneinfo;
      unknown names fall back to the system timezone.
    """
    if tz_name is None:
        tz_name = settings.timezone
    dt = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    if tz_name and tz_name != "local":
        try:
            from zoneinfo import ZoneInfo
            return dt.astimezone(ZoneInfo(tz_name))
        except (KeyError, ValueError):
            return dt.astimezone()
    return dt.astimezone()


def local_date(value, tz_name: str | None = None) -> date:
    """Calendar day of an epoch-millis int, a datetime or a date.

    Two timestamps are "the same day" exactly when this returns equal dates.
    Aware datetimes are converted into the configured zone; naive ones are
    taken as already local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        return to_local_datetime(datetime_to_millis(value), tz_name).date()
    if isinstance(value, date):
        return value
    return to_local_datetime(int(value), tz_name).date()


def date_key(value, tz_name: str | None = None) -> str:
    """'YYYY-MM-DD' string for the calendar day of `value`."""
    return local_date(value, tz_name).strftime(DATE_KEY_FORMAT)


def last_n_days(reference: date, n: int) -> list[date]:
    """The `n` calendar days ending at `reference`, oldest first.

    Example: last_n_days(date(2024, 1, 2), 3) -> [Dec 31, Jan 1, Jan 2]
    """
    return [reference - timedelta(days=days_ago) for days_ago in range(n - 1, -1, -1)]
