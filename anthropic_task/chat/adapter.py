"""ChatRequestAdapter: one Claude Messages API call, mapped to a ChatResult.

Flow per ``execute`` call:

1. Validate config, messages, system prompt and tools (``ValidationError``
   before any network traffic).
2. Build ``messages.create`` parameters, attaching optional fields only when
   present.
3. Observe the caller's cancellation token, then issue exactly one
   synchronous request; SDK/network failures surface as ``TransportError``.
4. Emit ``usage.input.tokens`` / ``usage.output.tokens`` counters.
5. Flatten content blocks (tool inputs that fail to decode are left ``None``
   and logged), serialize the raw response, and return the ``ChatResult``.

The adapter holds no per-call state; one instance may serve concurrent
executions as long as its metrics sink is thread-safe.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from ..base.cancellation import CancellationToken, CancelledError
from ..base.dto import ChatMessage, ChatRequestDTO, GenerationConfig, ToolDefinition
from ..base.errors import (
    RETRYABLE_CODES,
    DecodeError,
    SerializationError,
    TransportError,
    ValidationError,
    classify_exception,
)
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.metrics import Counter, MetricsSink, get_default_sink
from ..base.models import ChatResult, ToolUseSegment
from ..base.stubs import AnthropicMessage
from ..base.usage import CanonicalUsage, extract_usage
from ..config.defaults import INPUT_TOKENS_METRIC, OUTPUT_TOKENS_METRIC, PROVIDER_NAME
from .client import ClientFactory, default_client_factory
from .request_build import build_create_params
from .response_map import map_content, response_field, serialize_response

ConfigInput = Union[GenerationConfig, Mapping[str, Any]]
MessageInput = Union[ChatMessage, Mapping[str, Any]]
ToolInput = Union[ToolDefinition, Mapping[str, Any]]


def _format_validation_error(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def _close_client(client: Any) -> None:
    """Release the per-call SDK client (its HTTP connection pool)."""
    close = getattr(client, "close", None)
    if callable(close):
        close()


def validate_request(
    config: ConfigInput,
    messages: Optional[Iterable[MessageInput]],
    system: Optional[str] = None,
    tools: Optional[Iterable[ToolInput]] = None,
) -> ChatRequestDTO:
    """Validate raw or typed inputs into a ``ChatRequestDTO``.

    Raises:
        ValidationError: On any precondition failure.
    """
    try:
        return ChatRequestDTO.model_validate(
            {
                "config": config,
                "messages": list(messages) if messages is not None else None,
                "system": system,
                "tools": list(tools) if tools is not None else None,
            }
        )
    except PydanticValidationError as e:
        model = None
        if isinstance(config, GenerationConfig):
            model = config.model
        elif isinstance(config, Mapping):
            model = config.get("model")
        raise ValidationError(
            message=_format_validation_error(e),
            model=model if isinstance(model, str) else None,
            raw=e,
        ) from e


class ChatRequestAdapter:
    """Stateless adapter mapping a validated chat request onto one API call.

    Args:
        metrics: Host metrics sink receiving the two usage counters.
        client_factory: Builds an SDK client from the ``GenerationConfig``;
            defaults to a synchronous ``anthropic.Anthropic`` client.
        logger: Optional logger; defaults to ``anthropic_task.chat``.
    """

    def __init__(
        self,
        metrics: Optional[MetricsSink] = None,
        client_factory: Optional[ClientFactory] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._metrics = metrics or get_default_sink()
        self._client_factory = client_factory or default_client_factory()
        self._logger = logger or get_logger("anthropic_task.chat")

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def execute(
        self,
        config: ConfigInput,
        messages: Sequence[MessageInput],
        system: Optional[str] = None,
        tools: Optional[Sequence[ToolInput]] = None,
        *,
        cancellation_token: Optional[CancellationToken] = None,
        timeout: Optional[float] = None,
    ) -> ChatResult:
        """Run one chat completion and return the normalized result.

        Args:
            config: ``GenerationConfig`` or an equivalent mapping.
            messages: Non-empty ordered chat turns.
            system: Optional system prompt; omitted from the request when empty.
            tools: Optional tool definitions.
            cancellation_token: Checked right before the network call.
            timeout: Caller-owned request timeout in seconds, forwarded to the
                SDK; the adapter sets none of its own.

        Raises:
            ValidationError: Invalid inputs; no request was sent.
            CancelledError: The token was cancelled before the request.
            TransportError: The provider call failed.
            SerializationError: The response could not be rendered as JSON.
        """
        request = validate_request(config, messages, system, tools)
        model = request.config.model
        ctx = LogContext(provider=PROVIDER_NAME, model=model)
        params = build_create_params(request)

        if cancellation_token is not None:
            cancellation_token.raise_if_cancelled()

        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            attempt=1,
            messages=len(request.messages),
            has_system="system" in params,
            has_tools=bool(request.tools),
            max_tokens=request.config.max_tokens,
            temperature=request.config.temperature,
        )
        t0 = time.perf_counter()
        response = self._invoke(request.config, params, timeout, ctx)
        latency_ms = (time.perf_counter() - t0) * 1000.0

        usage = self._emit_usage(response, ctx)

        response_id = response_field(response, "id")
        if isinstance(response_id, str):
            ctx.response_id = response_id

        def _on_decode_error(index: int, block: ToolUseSegment, err: DecodeError) -> None:
            normalized_log_event(
                self._logger,
                "tool_use.decode_failed",
                ctx,
                phase="finalize",
                error_code=err.code.value,
                level=logging.WARNING,
                block_index=index,
                tool_use_id=block.id,
                tool_name=block.name,
                error=err.message,
            )

        output_text, tool_uses = map_content(
            response_field(response, "content") or [], on_decode_error=_on_decode_error
        )

        try:
            raw_response = serialize_response(response)
        except SerializationError as e:
            e.model = model
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=e.code.value,
                level=logging.ERROR,
                error=e.message,
            )
            raise

        stop_reason = response_field(response, "stop_reason")
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=bool(output_text or tool_uses),
            tokens=usage,
            latency_ms=round(latency_ms, 3),
            stop_reason=stop_reason,
            tool_uses=len(tool_uses),
        )
        return ChatResult(
            raw_response=raw_response,
            output_text=output_text,
            tool_uses=tool_uses or None,
            stop_reason=str(stop_reason) if stop_reason is not None else None,
        )

    # ---- Internal helpers ----

    def _invoke(
        self,
        config: GenerationConfig,
        params: dict,
        timeout: Optional[float],
        ctx: LogContext,
    ) -> Union[AnthropicMessage, Mapping[str, Any]]:
        """Issue the single ``messages.create`` call, mapping failures."""
        kwargs = dict(params)
        if timeout is not None:
            kwargs["timeout"] = timeout
        try:
            client = self._client_factory(config)
            try:
                return client.messages.create(**kwargs)
            finally:
                _close_client(client)
        except CancelledError:
            raise
        except Exception as e:
            code = classify_exception(e)
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="start",
                attempt=1,
                error_code=code.value,
                level=logging.ERROR,
                error=str(e) or type(e).__name__,
            )
            raise TransportError(
                message=str(e) or type(e).__name__,
                code=code,
                model=config.model,
                retryable=code in RETRYABLE_CODES,
                raw=e,
            ) from e

    def _emit_usage(self, response: Any, ctx: LogContext) -> CanonicalUsage:
        """Send the input/output token counters to the metrics sink."""
        usage = extract_usage(response)
        for metric_name, key in (
            (INPUT_TOKENS_METRIC, "input"),
            (OUTPUT_TOKENS_METRIC, "output"),
        ):
            value = usage[key]
            if value is None:
                normalized_log_event(
                    self._logger,
                    "metrics.usage_missing",
                    ctx,
                    phase="metrics",
                    level=logging.WARNING,
                    metric=metric_name,
                )
                continue
            self._metrics.metric(Counter.of(metric_name, value))
        return usage


__all__ = ["ChatRequestAdapter", "validate_request"]
