"""Thread-safe in-memory metrics sink.

Used by the local run context and by tests to inspect emitted counters.
Concurrent task executions may share one instance.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict, List

from .counter import Counter


class RecordingMetricsSink:
    """Collects counters in emission order and aggregates totals per name."""

    __slots__ = ("_lock", "_counters")

    def __init__(self) -> None:
        self._lock = RLock()
        self._counters: List[Counter] = []

    def metric(self, counter: Counter) -> None:
        with self._lock:
            self._counters.append(counter)

    @property
    def counters(self) -> List[Counter]:
        """Return a copy of every recorded counter, oldest first."""
        with self._lock:
            return list(self._counters)

    def totals(self) -> Dict[str, int]:
        """Return summed values keyed by counter name."""
        out: Dict[str, int] = {}
        with self._lock:
            for c in self._counters:
                out[c.name] = out.get(c.name, 0) + c.value
        return out

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()


__all__ = ["RecordingMetricsSink"]
