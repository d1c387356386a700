# triage_engine.py
#
# Single entry point for callers: pick a strategy, get a TriageResult.
# Every call builds its own request and result; nothing is cached.

import logging

import httpx

from config import DEFAULT_MODEL, STRATEGIES
from errors import InputError
from shared_types import AnalyzerSettings, TriageResult
from triage.heuristic_model import analyze_heuristic
from triage.remote_model import analyze_remote

logger = logging.getLogger(__name__)

VALID_STRATEGIES = set(STRATEGIES)


async def analyze(
    text: str,
    strategy: str = "heuristic",
    api_key: str | None = None,
    model: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> TriageResult:
    ticket = (text or "").strip()
    if not ticket:
        raise InputError("Paste a ticket description first.")

    if strategy not in VALID_STRATEGIES:
        raise InputError(f"Unknown strategy: {strategy!r}")

    if strategy == "remote":
        result = await analyze_remote(ticket, api_key, model or DEFAULT_MODEL, client=client)
    else:
        result = analyze_heuristic(ticket)

    logger.info(
        "🎫 Ticket triaged (%s) → severity=%s, panic=%d",
        strategy, result.severity.value, result.panic,
    )
    return result


async def analyze_with_settings(
    text: str,
    settings: AnalyzerSettings,
    client: httpx.AsyncClient | None = None,
) -> TriageResult:
    return await analyze(
        text,
        strategy=settings.strategy,
        api_key=settings.api_key,
        model=settings.model,
        client=client,
    )
