"""Unified adapter error taxonomy public surface.

This module re-exports the implementations under
``anthropic_task.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.adapter_error import (
    AdapterError,
    DecodeError,
    SerializationError,
    TransportError,
    ValidationError,
)
from .errors_parts.classification import RETRYABLE_CODES, classify_exception

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
