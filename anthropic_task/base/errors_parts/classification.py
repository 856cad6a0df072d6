"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, and message-based
heuristics as a fallback for SDK and transport exceptions that carry no status
(``anthropic.APIConnectionError``, raw ``httpx`` errors).
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

from .error_code import ErrorCode
from .adapter_error import AdapterError


def _valid_status(value: object) -> Optional[int]:
    return value if isinstance(value, int) and 100 <= value < 600 else None


def _extract_status(exc: BaseException) -> Optional[int]:
    """Return the HTTP status carried by ``exc``, if any.

    ``anthropic.APIStatusError`` exposes ``status_code``; raw ``httpx`` errors
    carry it on ``response``. A bare ``status`` attribute is accepted too.
    """
    for candidate in (
        getattr(exc, "status_code", None),
        getattr(exc, "status", None),
        getattr(getattr(exc, "response", None), "status_code", None),
    ):
        status = _valid_status(candidate)
        if status is not None:
            return status
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    413: ErrorCode.VALIDATION,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
    # Anthropic "overloaded_error"
    529: ErrorCode.UNAVAILABLE,
}

# Codes a caller may reasonably retry on its own.
RETRYABLE_CODES = frozenset(
    {
        ErrorCode.TRANSIENT,
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.UNAVAILABLE,
    }
)


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for non-HTTP exceptions."""
    pattern_groups = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "authentication")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "overloaded")),
        (ErrorCode.TRANSIENT, ("connection", "reset by peer")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
    )
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in pattern_groups:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. AdapterError passthrough.
        2. Timeout exceptions (sync/async, including SDK timeout types whose
           class name ends with ``Timeout``/``TimeoutError``).
        3. HTTP status mapping.
        4. Substring heuristics.
        5. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, AdapterError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if type(exc).__name__.endswith(("Timeout", "TimeoutError", "TimeoutException")):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            return _HTTP_STATUS_MAP[status]
        if status >= 500:
            return ErrorCode.SERVER_ERROR
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "RETRYABLE_CODES",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
