"""Timestamp rendering helpers."""

from __future__ import annotations

from datetime import datetime, tzinfo


def format_timestamp(epoch_seconds: float, tz: tzinfo | None = None) -> str:
    """Render UNIX epoch seconds as ``YYYY-MM-DD, h:mm AM/PM``.

    Args:
        epoch_seconds: Seconds since the epoch.
        tz: Timezone to render in. Defaults to the viewer's local timezone.

    Example:
        >>> from datetime import timezone
        >>> format_timestamp(1549900800, timezone.utc)
        '2019-02-11, 4:00 PM'
    """
    moment = datetime.fromtimestamp(epoch_seconds, tz=tz)
    hour = moment.hour % 12 or 12
    meridiem = "PM" if moment.hour >= 12 else "AM"
    return f"{moment:%Y-%m-%d}, {hour}:{moment:%M} {meridiem}"


__all__ = ["format_timestamp"]
