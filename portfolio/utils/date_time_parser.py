from datetime import date, datetime, time, timezone

from dateutil.parser import isoparse


def to_utc_instant(value) -> datetime:
    """
    Normalize a date-like value into a timezone-aware UTC datetime.

    Accepted inputs:
        - datetime: naive values are taken to be UTC, aware values are converted.
        - date: midnight UTC of that day.
        - str: any ISO 8601 date or datetime ("2021-03-01", "2021-03-01T09:30:00Z",
          "2021-03-01T09:30:00+02:00").
        - int/float: POSIX timestamp in seconds.

    Args:
        value: The value to normalize.

    Returns:
        datetime: The equivalent UTC instant.

    Raises:
        ValueError: If the value cannot be interpreted as a date or datetime.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("Date value must not be empty.")
        try:
            dt = isoparse(text)
        except (ValueError, OverflowError) as e:
            raise ValueError(
                f"Invalid date format: {value}. Expected an ISO 8601 date or datetime."
            ) from e
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            dt = datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Invalid timestamp: {value}.") from e
    else:
        raise ValueError(f"Unsupported date value of type {type(value).__name__}.")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
