# config.py
# All configuration and environment variables live here.
# No hardcoded values anywhere in api_server.py or the triage package.

import os

# ── Remote LLM endpoint ───────────────────────────────────────────────────────
OPENAI_RESPONSES_URL: str = os.getenv(
    "OPENAI_RESPONSES_URL", "https://api.openai.com/v1/responses"
)
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")   # server-side default
DEFAULT_MODEL: str = os.getenv("TRIAGE_MODEL", "gpt-4o-mini")
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "60"))
ERROR_BODY_MAX_CHARS: int = 300              # diagnostic slice of a failed response

# ── Strategy ──────────────────────────────────────────────────────────────────
STRATEGIES: tuple[str, ...] = ("heuristic", "remote")


def strategy_from_env(value: str | None) -> str:
    """Fail at startup on a bad TRIAGE_STRATEGY rather than per request."""
    strategy = (value or "heuristic").strip().lower()
    if strategy not in STRATEGIES:
        raise ValueError(f"TRIAGE_STRATEGY must be one of {STRATEGIES}, got {value!r}")
    return strategy


DEFAULT_STRATEGY: str = strategy_from_env(os.getenv("TRIAGE_STRATEGY"))

# ── Urgency bounds (minutes) ──────────────────────────────────────────────────
URGENCY_MIN_MINUTES: int = 5
URGENCY_MAX_MINUTES: int = 10080             # one week

# ── API ───────────────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
