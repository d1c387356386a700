# api_server.py
# FastAPI server: POST /analyze, GET /health
# The one place a TriageResult is turned into something a client displays.

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config import (
    DEFAULT_MODEL,
    DEFAULT_STRATEGY,
    LOG_LEVEL,
    OPENAI_API_KEY,
)
from errors import (
    CredentialMissing,
    InputError,
    ParseError,
    TransportError,
    TriageError,
)
from shared_types import Strategy, TriageResult
from triage_engine import analyze

logging.basicConfig(
    level=LOG_LEVEL,
    format="[%(asctime)s] [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Ticket Triage Engine",
    version="1.0.0",
)

# ── Request / Response Models ─────────────────────────────────────────────────

class AnalyzeRequest(BaseModel):
    text: str
    strategy: Strategy | None = None     # falls back to TRIAGE_STRATEGY
    api_key: str | None = None           # falls back to OPENAI_API_KEY
    model: str | None = None

class AnalyzeResponse(BaseModel):
    severity: str
    urgency: str
    emoji: str
    first_reply: str
    notes: str
    panic: int
    panic_label: str
    mode: str
    status: str

class HealthResponse(BaseModel):
    status: str
    default_strategy: str
    remote_configured: bool

# ── Error mapping ─────────────────────────────────────────────────────────────

_ERROR_STATUS = {
    InputError: 422,
    CredentialMissing: 400,
    TransportError: 502,
    ParseError: 502,
}

@app.exception_handler(TriageError)
async def triage_error_handler(request: Request, exc: TriageError):
    status_code = _ERROR_STATUS.get(type(exc), 500)
    logger.warning("⚠️  Analysis failed (%s): %s", type(exc).__name__, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})

# ── Rendering ─────────────────────────────────────────────────────────────────

def render_result(result: TriageResult, mode: str) -> AnalyzeResponse:
    """Render any TriageResult the same way, whichever analyzer produced it."""
    panic = max(0, min(100, int(result.panic)))
    return AnalyzeResponse(
        severity=result.severity.value,
        urgency=result.urgency,
        emoji=result.emoji,
        first_reply=result.first_reply,
        notes=result.notes,
        panic=panic,
        panic_label=f"{panic} / 100",
        mode=mode,
        status="Done (AI mode)." if mode == "remote" else "Done (heuristic mode).",
    )

# ── POST /analyze ─────────────────────────────────────────────────────────────

@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_ticket(req: AnalyzeRequest):
    strategy = req.strategy or DEFAULT_STRATEGY
    result = await analyze(
        req.text,
        strategy=strategy,
        api_key=req.api_key or OPENAI_API_KEY,
        model=req.model or DEFAULT_MODEL,
    )
    return render_result(result, strategy)

# ── GET /health ───────────────────────────────────────────────────────────────

@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="ok",
        default_strategy=DEFAULT_STRATEGY,
        remote_configured=bool(OPENAI_API_KEY),
    )

# ── Entry Point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    from config import API_HOST, API_PORT
    uvicorn.run("api_server:app", host=API_HOST, port=API_PORT, reload=True)
