# tests/test_scoring_rules.py

import pytest

from shared_types import SIGNAL_NAMES
from triage.scoring_rules import compute_signals, active_signals


def test_all_detectors_present():
    signals = compute_signals("anything")
    assert set(signals) == set(SIGNAL_NAMES)


def test_checkout_scenario_signals():
    signals = compute_signals("Our payment checkout is down for all users, CEO is furious, urgent!!")
    assert active_signals(signals) == [
        "outage", "payments", "vip", "manyUsers", "angry", "urgentWords",
    ]
    assert signals["security"] is False
    assert signals["dataLoss"] is False


def test_case_insensitive():
    assert compute_signals("SECURITY BREACH")["security"] is True
    assert compute_signals("Sev1 incident")["urgentWords"] is True


@pytest.mark.parametrize("text", ["", "   ", "こんにちは、質問があります", "😀😀😀"])
def test_empty_and_non_ascii_never_fire(text):
    signals = compute_signals(text)
    assert not any(signals.values())


def test_substring_matching_is_not_word_bounded():
    # "know" contains "now"
    assert compute_signals("I don't know")["urgentWords"] is True


@pytest.mark.parametrize("text", ["at 10:45 it stopped", "for 20 minutes", "two hours ago", "3 days now"])
def test_time_signal(text):
    assert compute_signals(text)["time"] is True


def test_time_needs_whole_unit_word():
    assert compute_signals("minutesheet")["time"] is False


def test_signals_are_read_only():
    signals = compute_signals("outage")
    with pytest.raises(TypeError):
        signals["outage"] = False  # type: ignore[index]
