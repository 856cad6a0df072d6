"""
Normalized adapter error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the chat adapter and its error
classification helpers. Values are lowercase snake_case and are considered a
stable public contract for logging and task outputs.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    DECODE = "decode"
    SERIALIZATION = "serialization"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
