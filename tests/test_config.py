# tests/test_config.py

import pytest

from config import DEFAULT_STRATEGY, STRATEGIES, strategy_from_env


@pytest.mark.parametrize("value, expected", [
    (None, "heuristic"),
    ("", "heuristic"),
    ("remote", "remote"),
    ("  Heuristic ", "heuristic"),
])
def test_strategy_from_env_accepts_known_values(value, expected):
    assert strategy_from_env(value) == expected


@pytest.mark.parametrize("value", ["magic", "ai", "remote-ish"])
def test_strategy_from_env_rejects_unknown_values(value):
    with pytest.raises(ValueError, match="TRIAGE_STRATEGY"):
        strategy_from_env(value)


def test_default_strategy_is_valid():
    assert DEFAULT_STRATEGY in STRATEGIES
