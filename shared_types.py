# shared_types.py  ──  the types every strategy and the API share
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Mapping, Optional

Strategy = Literal['heuristic', 'remote']

# Fixed detector names, in the order they are reported in notes.
SIGNAL_NAMES = (
    'outage', 'payments', 'security', 'vip', 'manyUsers',
    'dataLoss', 'angry', 'urgentWords', 'time',
)

Signals = Mapping[str, bool]


class Severity(str, Enum):
    LOW      = 'Low'
    MEDIUM   = 'Medium'
    HIGH     = 'High'
    CRITICAL = '🔥 On Fire'


@dataclass(frozen=True)
class TriageResult:
    severity: Severity
    urgency: str                  # "Respond within …", never raw minutes
    emoji: str
    first_reply: str
    notes: str
    panic: int                    # ∈ [0,100]


@dataclass(frozen=True)
class AnalyzerSettings:
    strategy: Strategy  = 'heuristic'
    api_key: Optional[str] = None
    model: Optional[str]   = None
