# triage/reply_composer.py

from shared_types import Severity, Signals

_OPENERS = {
    Severity.CRITICAL: "Thanks for flagging this — we’re treating it as top priority.",
    Severity.HIGH: "Thanks — we’re on it and investigating now.",
    Severity.MEDIUM: "Thanks — we’ve received this and are looking into it.",
    Severity.LOW: "Thanks — we’ve received your request.",
}

# First matching signal wins. Kept separate from the emoji order on purpose.
_QUESTIONS = [
    ("security", "Can you share any relevant logs, timestamps, and whether credentials may be exposed?"),
    ("outage", "Can you confirm scope (who is impacted) and provide timestamps / error messages?"),
    ("payments", "Can you share order IDs, timestamps, and any payment provider error details?"),
]
_DEFAULT_QUESTION = "Can you share steps to reproduce and expected vs actual behavior?"

_ETAS = {
    Severity.CRITICAL: "Next update in ~30 minutes (or sooner if we identify the cause).",
    Severity.HIGH: "Next update in ~2 hours.",
    Severity.MEDIUM: "Next update by end of day.",
    Severity.LOW: "We’ll follow up once we’ve investigated.",
}


def pick_question(signals: Signals) -> str:
    for name, question in _QUESTIONS:
        if signals.get(name):
            return question
    return _DEFAULT_QUESTION


def compose_reply(severity: Severity, signals: Signals) -> str:
    """Opener, targeted question and ETA, separated by blank lines."""
    opener = _OPENERS[severity]
    ask = pick_question(signals)
    eta = _ETAS[severity]
    return f"{opener}\n\n{ask}\n\n{eta}"
