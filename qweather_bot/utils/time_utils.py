from datetime import datetime

UPDATE_TIME_FORMAT = "%Y-%m-%d %H:%M"


def parse_update_time(value: str) -> datetime:
    """
    Parse a QWeather ISO-8601 timestamp.

    QWeather sends values such as ``2020-06-30T22:00+08:00``. A trailing ``Z``
    and naive timestamps are accepted too.

    Raises:
        ValueError: If the value is not an ISO-8601 timestamp
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid update time: {value!r}")

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def format_update_time(value: str) -> str:
    """
    Render an update time as ``YYYY-MM-DD HH:mm``.

    The wall-clock time of the offset carried by the value is kept, so the
    output does not depend on the host timezone.
    """
    return parse_update_time(value).strftime(UPDATE_TIME_FORMAT)
