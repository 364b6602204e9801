"""Number-to-text helpers for distances, durations and clock times.

All wording comes from an injected localizer; this module only decides
which message to use and how to round the numbers going into it.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .domain.models import DistanceUnits
    from .ports.localization import LocalizerPort

MILES_PER_KILOMETER = 0.621371


def kilometers_to_miles(km: float) -> float:
    return km * MILES_PER_KILOMETER


def _trim_number(value: float) -> str:
    # One decimal below 10 units, whole numbers above.
    if abs(value) < 10:
        text = f"{value:.1f}"
        return text[:-2] if text.endswith(".0") else text
    return str(round(value))


def format_distance(value: float, units: DistanceUnits, localizer: LocalizerPort) -> str:
    """Format ``value`` already expressed in ``units``, e.g. ``"2 km"``."""
    unit_label = localizer.translate(f"shortened_distances.{units.value}")
    return f"{_trim_number(value)} {unit_label}"


def format_duration(seconds: float, localizer: LocalizerPort, shortform: bool = False) -> str:
    """Format a duration, e.g. ``"1 hr 5 min"`` in shortform."""
    prefix = "times_shortform" if shortform else "times"

    def unit(key: str, n: int) -> str:
        suffix = key if n == 1 else f"{key}s"
        return localizer.translate(f"{prefix}.$n_{suffix}", n=n)

    if seconds < 60:
        return localizer.translate(f"{prefix}.$n_seconds", n=round(seconds))

    minutes = round(seconds / 60)
    if minutes < 60:
        return unit("minute", minutes)

    hours, minutes = divmod(minutes, 60)
    if hours < 24:
        parts = [unit("hour", hours)]
        if minutes:
            parts.append(unit("minute", minutes))
        return " ".join(parts)

    days, hours = divmod(hours, 24)
    parts = [unit("day", days)]
    if hours:
        parts.append(unit("hour", hours))
    return " ".join(parts)


def format_time(epoch_millis: int, tz: Optional[tzinfo] = None) -> str:
    """Clock time for an epoch timestamp, local time unless ``tz`` is given."""
    return datetime.fromtimestamp(epoch_millis / 1000, tz).strftime("%H:%M")
