"""Cooperative cancellation primitives (public API facade).

The orchestration host owns cancellation: it hands the adapter a
``CancellationToken`` and the adapter observes it before issuing the provider
call. ``CancelledError`` propagates to the caller unchanged.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
