# triage/urgency.py
#
# Minutes → "Respond within …". The heuristic path tops out at a fixed
# "1 business day"; the remote path rounds to whole days. Both are kept.

import math

from config import URGENCY_MIN_MINUTES, URGENCY_MAX_MINUTES


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_minutes(value) -> float:
    try:
        minutes = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(minutes):
        return 0.0
    return minutes


def _minutes_text(minutes: float) -> str:
    if float(minutes).is_integer():
        return f"{int(minutes)}"
    return f"{minutes:g}"


def format_heuristic_urgency(minutes: int) -> str:
    if minutes < 60:
        return f"Respond within {_minutes_text(minutes)} minutes"
    if minutes < 1440:
        return f"Respond within {_round_half_up(minutes / 60)} hours"
    return "Respond within 1 business day"


def format_remote_urgency(minutes) -> str:
    """Format a model-supplied ``urgency_minutes`` value.

    The value is coerced to a number (anything unusable counts as 0) and
    clamped to the schema bounds before formatting, since the model is not
    guaranteed to honour the schema.
    """
    m = max(URGENCY_MIN_MINUTES, min(URGENCY_MAX_MINUTES, _as_minutes(minutes)))
    if m < 60:
        return f"Respond within {_minutes_text(m)} minutes"
    hours = _round_half_up(m / 60)
    if hours < 24:
        return f"Respond within {hours} hours"
    days = _round_half_up(hours / 24)
    return f"Respond within {days} day(s)"
