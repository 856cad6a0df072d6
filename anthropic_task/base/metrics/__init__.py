"""Counter metrics handed to the orchestration host.

Exports the ``Counter`` value type, the ``MetricsSink`` contract and the
bundled sinks (no-op default, in-memory recorder, structured-log writer).
"""

from .counter import COUNTER_TYPE, TOKEN_UNIT, Counter
from .logging_sink import LoggingMetricsSink
from .recording import RecordingMetricsSink
from .sink import MetricsSink, NoOpMetricsSink, get_default_sink

__all__ = [
    "Counter",
    "COUNTER_TYPE",
    "TOKEN_UNIT",
    "MetricsSink",
    "NoOpMetricsSink",
    "RecordingMetricsSink",
    "LoggingMetricsSink",
    "get_default_sink",
]
