# triage/scoring_rules.py

import re
from types import MappingProxyType

from shared_types import SIGNAL_NAMES, Signals

# Plain substring vocabularies: "now" also fires inside "know", "500" inside "1500".
_SIGNAL_PATTERNS = {
    "outage": r"(down|outage|unavailable|cannot access|can't access|500|503|crash|broken|fatal)",
    "payments": r"(payment|checkout|billing|stripe|paypal|invoice)",
    "security": r"(security|breach|leak|token|credential|hacked|vulnerability|cve)",
    "vip": r"(ceo|vp|director|executive|important client|enterprise)",
    "manyUsers": r"(all users|everyone|company-wide|entire site|global)",
    "dataLoss": r"(data loss|deleted|missing data|corrupt)",
    "angry": r"(angry|furious|refund|lawsuit|cancel|churn)",
    "urgentWords": r"(urgent|asap|immediately|now|critical|p1|sev1)",
    "time": r"(\d{1,2}:\d{2}|\bminutes\b|\bhours\b|\bdays\b)",
}

_COMPILED = {
    name: re.compile(_SIGNAL_PATTERNS[name], re.IGNORECASE)
    for name in SIGNAL_NAMES
}


def compute_signals(text: str) -> Signals:
    text_lower = (text or "").lower()
    flags = {name: bool(pattern.search(text_lower)) for name, pattern in _COMPILED.items()}
    return MappingProxyType(flags)


def active_signals(signals: Signals) -> list[str]:
    return [name for name in SIGNAL_NAMES if signals.get(name)]
