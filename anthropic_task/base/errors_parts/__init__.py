"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `anthropic_task.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .adapter_error import (
    AdapterError,
    DecodeError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .classification import RETRYABLE_CODES, classify_exception

__all__ = [
    "ErrorCode",
    "AdapterError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "SerializationError",
    "RETRYABLE_CODES",
    "classify_exception",
]
