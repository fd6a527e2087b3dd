"""Display helpers for feed values."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

INVALID_DATE = "Invalid Date"
DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: Any) -> str:
    """Render a feed timestamp for display.

    Accepts ISO 8601 text (a trailing ``Z`` included), ``datetime``/``date``
    objects and epoch milliseconds. ``None`` renders as an empty string and
    unparseable input as ``"Invalid Date"``.
    """

    if value is None:
        return ""
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return INVALID_DATE
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return INVALID_DATE
    return moment.strftime(DISPLAY_FORMAT)


__all__ = ["format_timestamp"]
