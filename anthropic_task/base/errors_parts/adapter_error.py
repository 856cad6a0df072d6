"""
Structured adapter error exception types.

`AdapterError` wraps every failure the chat adapter surfaces with a normalized
`ErrorCode`. The subclasses name the failure class a caller can act on:

* ``ValidationError``: request rejected locally, before any network call.
* ``TransportError``: the single provider round-trip failed.
* ``DecodeError``: one tool-use input could not be decoded (contained per item).
* ``SerializationError``: the raw response could not be rendered as JSON text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class AdapterError(Exception):
    """Represents a structured adapter error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for logging.
        code: Normalized :class:`ErrorCode` classification for the failure.
        provider: Provider key where the error originated.
        model: Optional model name associated with the failure.
        retryable: Hint for the caller's own retry policy (never acted upon here).
        raw: Optional original exception for diagnostics.
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    provider: str = "anthropic"
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class ValidationError(AdapterError):
    """Request failed local validation; no network call was made."""

    code: ErrorCode = ErrorCode.VALIDATION


@dataclass
class TransportError(AdapterError):
    """Network failure, non-2xx response or authentication rejection."""


@dataclass
class DecodeError(AdapterError):
    """A single tool-use input payload could not be decoded into a mapping."""

    code: ErrorCode = ErrorCode.DECODE


@dataclass
class SerializationError(AdapterError):
    """The provider response could not be serialized to canonical JSON text."""

    code: ErrorCode = ErrorCode.SERIALIZATION


__all__ = [
    "AdapterError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "SerializationError",
]
