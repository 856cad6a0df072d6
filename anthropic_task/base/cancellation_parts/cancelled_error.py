"""Cancellation error type.

Defines the public ``CancelledError`` used to signal cooperative cancellation
of a task execution.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Distinct from adapter failures so callers can map it to their own
    "killed" status instead of treating it as a provider error.
    """


__all__ = ["CancelledError"]
