"""Helpers for storing and comparing instants."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(timezone.utc)


def to_storage_instant(value: datetime) -> str:
    """Serialize an aware datetime as normalized UTC ISO-8601 text.

    Every stored instant shares the same offset and precision, so string
    comparison in SQL matches chronological order.

    Args:
        value: Timezone-aware datetime.

    Returns:
        str: ISO-8601 text such as ``2024-01-05T10:00:00.000000+00:00``.

    Raises:
        ValueError: If the datetime is naive.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Instants must be timezone-aware")
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_storage_instant(raw: str | datetime | None) -> datetime | None:
    """Parse a stored instant back into an aware UTC datetime."""
    if raw is None:
        return None
    if isinstance(raw, datetime):
        parsed = raw
    else:
        parsed = datetime.fromisoformat(str(raw))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """Return the half-open UTC range covering a calendar month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).

    Returns:
        tuple[datetime, datetime]: First instant of the month and first
        instant of the following month.
    """
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


__all__ = [
    "utc_now",
    "to_storage_instant",
    "from_storage_instant",
    "month_bounds",
]
