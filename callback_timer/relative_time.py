"""Human readable durations between two clock readings.

``calc(start, now)`` is the default formatter used by :func:`callback_timer.wrap`
when ``use_relative_time`` is on. Readings are plain seconds as returned by
``time.monotonic()`` or ``time.time()``; only their difference matters.
"""

from __future__ import annotations
from typing import Callable, List

from .i18n import t

_UNITS = (
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def format_number(value: float) -> str:
    """Render a number the way a JavaScript template literal would: ``2``, ``0.05``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def calc(start: float, now: float, locale: str = "en") -> str:
    """Describe the time between ``start`` and ``now``, e.g. ``"1 minute, 2.5 seconds"``."""
    # Round first so a remainder like 59.999s carries into the next unit
    remaining = round(max(now - start, 0.0), 2)
    parts: List[str] = []
    for unit, size in _UNITS:
        amount = int(remaining // size)
        if amount:
            parts.append(f"{amount} {t(unit, locale, amount)}")
            remaining -= amount * size
    seconds = round(remaining, 2)
    if seconds or not parts:
        parts.append(f"{format_number(seconds)} {t('second', locale, seconds)}")
    return ", ".join(parts)


def for_locale(locale: str) -> Callable[[float, float], str]:
    """Formatter bound to ``locale``, usable as ``WrapConfig.formatter``."""
    def _calc(start: float, now: float) -> str:
        return calc(start, now, locale)
    return _calc
