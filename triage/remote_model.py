# triage/remote_model.py
#
# LLM-backed triage over the OpenAI Responses API: one POST, a strict
# output schema, and defensive parsing of whatever comes back.

import json
import logging
import re

import httpx

from config import (
    OPENAI_RESPONSES_URL,
    DEFAULT_MODEL,
    HTTP_TIMEOUT_SECONDS,
    ERROR_BODY_MAX_CHARS,
    URGENCY_MIN_MINUTES,
    URGENCY_MAX_MINUTES,
)
from errors import CredentialMissing, ParseError, TransportError
from shared_types import Severity, TriageResult
from triage.urgency import format_remote_urgency

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a senior support triage assistant. Classify incoming support tickets "
    "with calm, practical judgment.\n"
    "Return ONLY valid JSON matching the schema. No markdown. No extra keys."
)

USER_RULES = """Rules:
- Severity is about impact + risk (security/data loss/outage/VIP).
- urgency_minutes is the time until first meaningful response is needed.
- first_reply must be short, professional, and include 1-2 targeted questions + a realistic next update time.
- emoji should match the situation (one emoji).
- panic is 0..100."""

TRIAGE_SCHEMA = {
    "name": "ticket_triage",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "severity": {"type": "string", "enum": [s.value for s in Severity]},
            "urgency_minutes": {
                "type": "integer",
                "minimum": URGENCY_MIN_MINUTES,
                "maximum": URGENCY_MAX_MINUTES,
            },
            "emoji": {"type": "string"},
            "first_reply": {"type": "string"},
            "notes": {"type": "string"},
            "panic": {"type": "integer", "minimum": 0, "maximum": 100},
        },
        "required": ["severity", "urgency_minutes", "emoji", "first_reply", "notes", "panic"],
    },
}

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

# Accepted spellings of each tier, case-insensitive.
_SEVERITY_ALIASES = {s.value.lower(): s for s in Severity}
_SEVERITY_ALIASES["critical"] = Severity.CRITICAL
_SEVERITY_ALIASES["on fire"] = Severity.CRITICAL


# ── Request ───────────────────────────────────────────────────────────────────

def build_request_body(ticket_text: str, model: str) -> dict:
    return {
        "model": model,
        "input": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": f"Ticket:\n{ticket_text}\n\n{USER_RULES}"},
        ],
        "response_format": {"type": "json_schema", "json_schema": TRIAGE_SCHEMA},
    }


def build_headers(api_key: str) -> dict:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


# ── Response shapes ───────────────────────────────────────────────────────────
# Each shape returns the text blob it can see, or None if the payload is not
# in that shape. They are tried in order.

def _convenience_text(payload) -> str | None:
    if not isinstance(payload, dict):
        return None
    text = payload.get("output_text")
    if isinstance(text, str) and text.strip():
        return text.strip()
    return None


def _stitched_parts(payload) -> str | None:
    if not isinstance(payload, dict):
        return None
    parts = []
    output = payload.get("output")
    if not isinstance(output, list):
        return None
    for item in output:
        if not isinstance(item, dict):
            continue
        contents = item.get("content")
        if not isinstance(contents, list):
            continue
        for content in contents:
            if not isinstance(content, dict):
                continue
            if content.get("type") in ("output_text", "text") and content.get("text"):
                parts.append(str(content["text"]))
    if not parts:
        return None
    return "".join(parts).strip()


_RESPONSE_SHAPES = (_convenience_text, _stitched_parts)


def extract_output_text(payload) -> str:
    for shape in _RESPONSE_SHAPES:
        text = shape(payload)
        if text is not None:
            return text
    return ""


def _embedded_object(text: str) -> dict | None:
    match = _JSON_OBJECT.search(text)
    if not match:
        return None
    try:
        obj = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return obj if isinstance(obj, dict) else None


def parse_triage_json(text: str) -> dict:
    """Whole blob first, then the widest ``{...}`` span inside it."""
    text = text if isinstance(text, str) else ""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError:
        obj = None
    if isinstance(obj, dict):
        return obj

    # A JSON string may itself wrap the object; search its decoded value.
    obj = _embedded_object(obj if isinstance(obj, str) else text)
    if obj is None:
        raise ParseError()
    return obj


# ── Normalisation ─────────────────────────────────────────────────────────────

def _coerce_severity(value) -> Severity:
    severity = _SEVERITY_ALIASES.get(str(value or "").strip().lower())
    if severity is None:
        raise ParseError(f"Model returned an unknown severity: {value!r}")
    return severity


def _coerce_panic(value) -> int:
    try:
        panic = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        panic = 0
    return max(0, min(100, panic))


def _as_text(value) -> str:
    return "" if value is None else str(value)


def _required_text(obj: dict, field: str) -> str:
    value = obj.get(field)
    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"Model output is missing a usable {field!r}.")
    return value


def normalize_remote_result(obj: dict) -> TriageResult:
    return TriageResult(
        severity=_coerce_severity(obj.get("severity")),
        urgency=format_remote_urgency(obj.get("urgency_minutes")),
        emoji=_required_text(obj, "emoji"),
        first_reply=_required_text(obj, "first_reply"),
        notes=_as_text(obj.get("notes")),
        panic=_coerce_panic(obj.get("panic")),
    )


# ── Call ──────────────────────────────────────────────────────────────────────

async def _post(client: httpx.AsyncClient, body: dict, headers: dict) -> httpx.Response:
    try:
        return await client.post(OPENAI_RESPONSES_URL, json=body, headers=headers)
    except httpx.HTTPError as e:
        logger.warning("⚠️  Remote triage request failed: %s", e.__class__.__name__)
        raise TransportError(None, str(e)[:ERROR_BODY_MAX_CHARS]) from e


async def analyze_remote(
    ticket_text: str,
    api_key: str | None,
    model: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> TriageResult:
    """
    Classify ``ticket_text`` with the remote model.

    Raises CredentialMissing before anything is sent when ``api_key`` is blank,
    TransportError on a non-2xx response, ParseError when no triage object can
    be recovered from the output. Nothing is retried here.
    """
    api_key = (api_key or "").strip()
    if not api_key:
        raise CredentialMissing()

    model = model or DEFAULT_MODEL
    body = build_request_body(ticket_text, model)
    headers = build_headers(api_key)

    logger.info("🤖 Remote triage → model=%s, ticket_chars=%d", model, len(ticket_text))
    if client is None:
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as own_client:
            resp = await _post(own_client, body, headers)
    else:
        resp = await _post(client, body, headers)

    if not resp.is_success:
        logger.warning("❌ Remote triage returned HTTP %s", resp.status_code)
        raise TransportError(resp.status_code, resp.text[:ERROR_BODY_MAX_CHARS])

    try:
        text = extract_output_text(resp.json())
    except ValueError:
        # Body was not JSON at all; let the brace search have a go at it.
        text = resp.text

    obj = parse_triage_json(text)
    result = normalize_remote_result(obj)
    logger.info("✅ Remote triage → severity=%s, panic=%d", result.severity.value, result.panic)
    return result
