"""ChatCompletion task: host-facing properties mapped onto the chat adapter.

A workflow host renders the task definition (templates, secrets) and then
calls :meth:`ChatCompletion.run` with its run context. Properties the
definition leaves unset fall back to :func:`anthropic_task.config.get_task_config`
(environment, optional config file, built-in defaults); explicit properties
always win.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .base.cancellation import CancellationToken
from .base.dto import ChatMessage, ToolDefinition
from .base.errors import ValidationError
from .base.metrics import Counter, LoggingMetricsSink, MetricsSink, RecordingMetricsSink
from .base.models import ChatResult
from .chat import ChatRequestAdapter, ClientFactory, default_client_factory
from .config import get_task_config


@runtime_checkable
class RunContext(Protocol):
    """What the task needs from its host: somewhere to send counters.

    Hosts may also expose ``cancellation_token`` and ``timeout`` attributes;
    both are read with ``getattr`` and are optional.
    """

    def metric(self, counter: Counter) -> None:
        ...


@dataclass
class LocalRunContext:
    """In-process run context recording every counter it receives.

    With ``log_metrics`` set, each counter is also written as a
    ``metrics.counter`` log event before it is recorded.
    """

    metrics: RecordingMetricsSink = field(default_factory=RecordingMetricsSink)
    cancellation_token: Optional[CancellationToken] = None
    timeout: Optional[float] = None
    log_metrics: bool = False
    _sink: MetricsSink = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._sink = LoggingMetricsSink(delegate=self.metrics) if self.log_metrics else self.metrics

    def metric(self, counter: Counter) -> None:
        self._sink.metric(counter)


class ChatCompletion(BaseModel):
    """Send chat messages to Claude and return the normalized result.

    Attributes mirror the task definition keys (``apiKey``, ``maxTokens``,
    ``topP`` ...); snake_case names are accepted as well. ``id`` and ``type``
    are carried for hosts that pass the whole flow entry.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    id: Optional[str] = None
    type: Optional[str] = None
    api_key: Optional[str] = Field(default=None, repr=False)
    model: Optional[str] = None
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    messages: List[ChatMessage] = Field(default_factory=list)
    system: Optional[str] = None
    tools: Optional[List[ToolDefinition]] = None

    @classmethod
    def from_definition(cls, definition: Mapping[str, Any]) -> "ChatCompletion":
        """Build a task from a rendered definition mapping.

        Raises:
            ValidationError: When the definition has unknown keys or values
                of the wrong shape.
        """
        try:
            return cls.model_validate(dict(definition))
        except PydanticValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
                for err in e.errors()
            )
            raise ValidationError(message=details, raw=e) from e

    def resolve_config(self) -> Dict[str, Any]:
        """Merge explicit properties over the layered configuration."""
        cfg = get_task_config()
        explicit = {
            "api_key": self.api_key,
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "top_k": self.top_k,
        }
        resolved: Dict[str, Any] = {
            k: v if v is not None else cfg.get(k) for k, v in explicit.items()
        }
        resolved["base_url"] = cfg.get("base_url")
        return resolved

    def run(
        self,
        run_context: RunContext,
        *,
        client_factory: Optional[ClientFactory] = None,
    ) -> ChatResult:
        """Execute the chat completion, sending usage counters to ``run_context``.

        Raises:
            ValidationError: Missing or invalid properties.
            TransportError: The provider call failed.
            SerializationError: The response could not be rendered as JSON.
        """
        resolved = self.resolve_config()
        base_url = resolved.pop("base_url", None)
        config = {k: v for k, v in resolved.items() if v is not None}
        adapter = ChatRequestAdapter(
            metrics=run_context,
            client_factory=client_factory or default_client_factory(base_url),
        )
        return adapter.execute(
            config,
            self.messages,
            system=self.system,
            tools=self.tools,
            cancellation_token=getattr(run_context, "cancellation_token", None),
            timeout=getattr(run_context, "timeout", None),
        )


__all__ = ["ChatCompletion", "RunContext", "LocalRunContext"]
