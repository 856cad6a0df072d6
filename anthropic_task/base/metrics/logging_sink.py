"""Metrics sink that writes each counter as a structured log event."""

from __future__ import annotations

import logging
from typing import Optional

from ..logging import get_logger, normalized_log_event
from .counter import Counter


class LoggingMetricsSink:
    """Emit ``metrics.counter`` events; optionally chain to another sink."""

    def __init__(self, logger: Optional[logging.Logger] = None, delegate=None) -> None:
        self._logger = logger or get_logger("anthropic_task.metrics")
        self._delegate = delegate

    def metric(self, counter: Counter) -> None:
        normalized_log_event(
            self._logger,
            "metrics.counter",
            phase="metrics",
            name=counter.name,
            value=counter.value,
            unit=counter.unit,
            tags=counter.tags or None,
        )
        if self._delegate is not None:
            self._delegate.metric(counter)


__all__ = ["LoggingMetricsSink"]
