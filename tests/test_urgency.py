# tests/test_urgency.py

import pytest

from triage.urgency import format_heuristic_urgency, format_remote_urgency


# --------------------------
# Heuristic path
# --------------------------

@pytest.mark.parametrize("minutes, expected", [
    (15, "Respond within 15 minutes"),
    (60, "Respond within 1 hours"),
    (240, "Respond within 4 hours"),
    (1440, "Respond within 1 business day"),
    (5000, "Respond within 1 business day"),
])
def test_heuristic_format(minutes, expected):
    assert format_heuristic_urgency(minutes) == expected


# --------------------------
# Remote path
# --------------------------

@pytest.mark.parametrize("minutes, expected", [
    (15, "Respond within 15 minutes"),
    (60, "Respond within 1 hours"),
    (240, "Respond within 4 hours"),
    (1440, "Respond within 1 day(s)"),
    (10080, "Respond within 7 day(s)"),
])
def test_remote_format(minutes, expected):
    assert format_remote_urgency(minutes) == expected


def test_same_minutes_differ_between_paths():
    assert format_heuristic_urgency(1440) != format_remote_urgency(1440)


def test_remote_rounds_half_up():
    assert format_remote_urgency(90) == "Respond within 2 hours"
    assert format_remote_urgency(150) == "Respond within 3 hours"


def test_remote_days_round_from_hours():
    # 2159 min → 36 h → 1.5 days → 2
    assert format_remote_urgency(2159) == "Respond within 2 day(s)"


@pytest.mark.parametrize("value, expected", [
    (None, "Respond within 5 minutes"),
    ("abc", "Respond within 5 minutes"),
    (0, "Respond within 5 minutes"),
    (-30, "Respond within 5 minutes"),
    (999999, "Respond within 7 day(s)"),
    ("45", "Respond within 45 minutes"),
])
def test_remote_clamps_and_coerces(value, expected):
    assert format_remote_urgency(value) == expected
