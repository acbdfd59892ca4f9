"""Pace per 100 m, for display only.

Never persisted; computed from the distance and duration of each practice.
"""

from typing import Optional

PACE_PLACEHOLDER = "0:00"


def pace_seconds_per_100m(distance_meters: float, duration_minutes: float) -> Optional[float]:
    """Seconds per 100 m, or ``None`` when the distance gives no defined pace."""
    if distance_meters <= 0:
        return None
    return (duration_minutes * 60) / (distance_meters / 100)


def format_pace(distance_meters: float, duration_minutes: float) -> str:
    """Pace per 100 m as ``m:ss``.

    A zero (or negative) distance shows the ``0:00`` placeholder.
    """
    seconds = pace_seconds_per_100m(distance_meters, duration_minutes)
    if seconds is None:
        return PACE_PLACEHOLDER

    # Round the total first so 59.6 s reads 1:00, not 0:60
    minutes, secs = divmod(int(round(seconds)), 60)
    return f"{minutes}:{secs:02d}"
