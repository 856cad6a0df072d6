"""Metrics sink contract and default implementation.

Purpose
-------
- Provide a tiny contract for handing counters to the orchestration host
  without coupling the adapter to any particular metrics backend.

Failure Modes
-------------
- Sinks are owned by the host; the adapter does not swallow their errors.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .counter import Counter


@runtime_checkable
class MetricsSink(Protocol):
    """Anything exposing ``metric(counter)``, e.g. a host run context."""

    def metric(self, counter: Counter) -> None:
        """Record a single counter increment."""
        ...


class NoOpMetricsSink:
    """Default sink that discards counters (safe baseline)."""

    def metric(self, counter: Counter) -> None:  # noqa: D401 - trivial
        """Accept counter and do nothing."""
        return


_DEFAULT_SINK: MetricsSink | None = None


def get_default_sink() -> MetricsSink:
    """Return the process-wide default sink (no-op)."""
    global _DEFAULT_SINK
    if _DEFAULT_SINK is None:
        _DEFAULT_SINK = NoOpMetricsSink()
    return _DEFAULT_SINK


__all__ = ["MetricsSink", "NoOpMetricsSink", "get_default_sink"]
