from datetime import datetime, timedelta, timezone

_TICK = timedelta(microseconds=1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def next_update_timestamp(previous: datetime | None) -> datetime:
    """
    Compute the `updated_at` value for a write that follows `previous`.

    The result is the current UTC time, bumped by one microsecond past
    `previous` when the clock has not advanced, so successive updates of
    the same row always carry strictly increasing timestamps.

    Some backends (SQLite) hand back naive datetimes for timezone-aware
    columns; in that case the result is naive UTC as well so the two stay
    comparable.

    Args:
        previous (datetime | None): The row's current `updated_at`, or None
            for a brand new row.

    Returns:
        datetime: The timestamp to store.
    """
    now = utc_now()
    if previous is None:
        return now

    if previous.tzinfo is None:
        now = now.replace(tzinfo=None)
    else:
        previous = previous.astimezone(timezone.utc)

    floor = previous + _TICK
    return now if now >= floor else floor


def format_datetime_to_iso_utc_z(dt_object: datetime) -> str:
    """
    Formats a datetime object into an ISO 8601 string with microseconds
    and 'Z' for UTC timezone.

    Args:
        dt_object (datetime): The datetime object to format.

    Returns:
        str: The formatted ISO 8601 datetime string (e.g., "2023-10-27T10:30:45.123456Z").

    Raises:
        ValueError: If the dt_object is not a datetime.
    """
    if not isinstance(dt_object, datetime):
        raise ValueError("Input must be a datetime object.")
    if dt_object.tzinfo is not None:
        dt_object = dt_object.astimezone(timezone.utc)
    return (
        dt_object.replace(tzinfo=None).isoformat(timespec="microseconds") + "Z"
    )
