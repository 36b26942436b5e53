from datetime import datetime, timezone


def utc_ms(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """Epoch millis for a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp() * 1000)
