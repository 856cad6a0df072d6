"""anthropic_task package

Workflow task that sends chat messages to Anthropic's Claude Messages API.

Public API (re-exported):
    - Version: ``__version__``
    - Task: :class:`ChatCompletion`, :class:`LocalRunContext`, ``RunContext``
    - Adapter: :class:`ChatRequestAdapter`
    - Models: :class:`GenerationConfig`, :class:`ChatMessage`,
      :class:`ChatMessageType`, :class:`ToolDefinition`, :class:`ToolUse`,
      :class:`ChatResult`
    - Exceptions: :class:`AdapterError` and subclasses, :class:`ErrorCode`,
      :class:`CancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.dto import ChatMessage, ChatMessageType, GenerationConfig, ToolDefinition
from .base.errors import (
    AdapterError,
    DecodeError,
    ErrorCode,
    SerializationError,
    TransportError,
    ValidationError,
)
from .base.metrics import Counter, MetricsSink, RecordingMetricsSink
from .base.models import ChatResult, ToolUse
from .chat import ChatRequestAdapter
from .task import ChatCompletion, LocalRunContext, RunContext

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatCompletion",
    "LocalRunContext",
    "RunContext",
    "ChatRequestAdapter",
    "GenerationConfig",
    "ChatMessage",
    "ChatMessageType",
    "ToolDefinition",
    "ToolUse",
    "ChatResult",
    "Counter",
    "MetricsSink",
    "RecordingMetricsSink",
    "CancellationToken",
    "CancelledError",
    "AdapterError",
    "ValidationError",
    "TransportError",
    "DecodeError",
    "SerializationError",
    "ErrorCode",
]
