# triage/heuristic_model.py

from shared_types import Severity, Signals, TriageResult
from triage.scoring_rules import compute_signals, active_signals
from triage.reply_composer import compose_reply
from triage.urgency import format_heuristic_urgency

BASE_SCORE = 10

# Cumulative: a ticket firing everything sums to 165 before the clamp.
SIGNAL_WEIGHTS = {
    "outage": 30,
    "manyUsers": 20,
    "security": 35,
    "dataLoss": 25,
    "payments": 15,
    "vip": 10,
    "angry": 10,
    "urgentWords": 10,
}

# Highest threshold wins; lower bounds are inclusive.
SEVERITY_THRESHOLDS = [
    (85, Severity.CRITICAL),
    (60, Severity.HIGH),
    (35, Severity.MEDIUM),
]

RESPONSE_MINUTES = {
    Severity.CRITICAL: 15,
    Severity.HIGH: 60,
    Severity.MEDIUM: 240,
    Severity.LOW: 1440,
}

TIP_LINE = "Tip: enable AI mode for richer classification + better wording."


def panic_score(signals: Signals) -> int:
    score = BASE_SCORE
    for name, weight in SIGNAL_WEIGHTS.items():
        if signals.get(name):
            score += weight
    return max(0, min(100, score))


def severity_for_score(score: int) -> Severity:
    for threshold, severity in SEVERITY_THRESHOLDS:
        if score >= threshold:
            return severity
    return Severity.LOW


def pick_emoji(signals: Signals, score: int) -> str:
    if signals.get("security"):
        return "🛡️"
    if signals.get("outage"):
        return "🚨"
    if signals.get("payments"):
        return "💳"
    if score >= 60:
        return "😬"
    if score >= 35:
        return "🧯"
    return "✅"


def build_notes(signals: Signals) -> str:
    names = ", ".join(active_signals(signals)) or "none"
    return f"Signals: {names}\n{TIP_LINE}"


def analyze_heuristic(text: str) -> TriageResult:
    """Score ``text`` locally. Deterministic, no I/O, never raises."""
    signals = compute_signals(text)
    score = panic_score(signals)
    severity = severity_for_score(score)

    return TriageResult(
        severity=severity,
        urgency=format_heuristic_urgency(RESPONSE_MINUTES[severity]),
        emoji=pick_emoji(signals, score),
        first_reply=compose_reply(severity, signals),
        notes=build_notes(signals),
        panic=score,
    )
