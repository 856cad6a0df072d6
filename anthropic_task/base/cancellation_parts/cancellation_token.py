"""Cooperative cancellation token.

A host hands a token to the task; the adapter checks it once, right before
the provider request. Cancelling a token cancels every linked child.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """Thread-safe, one-way cancellation flag with cascading children."""

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: Optional[str] = None
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Mark the token cancelled (first reason wins) and cascade."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
            children = tuple(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Attach ``token`` so it follows this token; returns ``token``.

        A child linked after cancellation is cancelled immediately.
        """
        with self._lock:
            self._children.append(token)
            already = self._event.is_set()
        if already:
            token.cancel(self._reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` when cancellation was requested."""
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
