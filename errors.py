# errors.py
# Every failure the engine reports to its caller. One message each; no retries.

from typing import Optional


class TriageError(Exception):
    """Base class for all analysis failures."""


class InputError(TriageError):
    pass


class CredentialMissing(TriageError):
    def __init__(self, message: str = "No API key set. Use heuristic mode or supply an API key."):
        super().__init__(message)


class TransportError(TriageError):
    """Non-success response (or no response at all) from the remote endpoint."""

    def __init__(self, status_code: Optional[int], body: str):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            message = f"OpenAI request failed: {body}"
        else:
            message = f"OpenAI error ({status_code}): {body}"
        super().__init__(message)


class ParseError(TriageError):
    def __init__(self, message: str = "Could not parse JSON from model output."):
        super().__init__(message)
