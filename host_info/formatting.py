"""Human-readable rendering of byte counts and durations."""
from __future__ import annotations

_UNIT = 1024
_UNIT_PREFIXES = "KMGTPE"

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


def format_bytes(num_bytes: int) -> str:
    """Render ``num_bytes`` with a binary unit suffix, e.g. ``"1.5 MB"``."""
    if num_bytes < _UNIT:
        return f"{num_bytes} B"

    divisor, exponent = _UNIT, 0
    quotient = num_bytes // _UNIT
    while quotient >= _UNIT and exponent < len(_UNIT_PREFIXES) - 1:
        divisor *= _UNIT
        exponent += 1
        quotient //= _UNIT
    return f"{num_bytes / divisor:.1f} {_UNIT_PREFIXES[exponent]}B"


def format_uptime(seconds: int) -> str:
    days = seconds // _DAY
    hours = (seconds % _DAY) // _HOUR
    minutes = (seconds % _HOUR) // _MINUTE
    remainder = seconds % _MINUTE
    return f"{days} days, {hours} hours, {minutes} minutes, {remainder} seconds"
