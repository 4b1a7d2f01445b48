"""Human-readable duration formatting."""

from __future__ import annotations

from claude_statusline.config.defaults import ZERO_DURATION

_SECOND_MS = 1000
_MINUTE_MS = 60 * _SECOND_MS
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS
_YEAR_MS = 365 * _DAY_MS

_UNITS = (
    ("y", _YEAR_MS),
    ("d", _DAY_MS),
    ("h", _HOUR_MS),
    ("m", _MINUTE_MS),
    ("s", _SECOND_MS),
)


def format_duration(milliseconds: int) -> str:
    """Format milliseconds as a combined duration, e.g. ``"1h 2m 3s"``.

    Zero-valued units are left out and seconds are truncated to whole
    numbers. Durations under one second are shown in milliseconds.
    """
    if milliseconds <= 0:
        return ZERO_DURATION
    if milliseconds < _SECOND_MS:
        return f"{milliseconds}ms"

    parts = []
    remaining = milliseconds
    for suffix, size in _UNITS:
        value, remaining = divmod(remaining, size)
        if value:
            parts.append(f"{value}{suffix}")
    return " ".join(parts)
