"""Anthropic message response protocol."""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .anthropic_usage import AnthropicUsage


class AnthropicMessage(Protocol):
    """Protocol for the object returned by ``client.messages.create``.

    Attributes:
        id: Provider message id.
        content: Ordered content blocks (text, tool_use, thinking, ...).
        stop_reason: Why generation ended (``end_turn``, ``tool_use`` ...).
        usage: Token accounting for the call.
    """

    id: str
    content: Sequence[Any]
    stop_reason: Optional[str]
    usage: AnthropicUsage

    def model_dump(self, **kwargs: Any) -> dict:  # pragma: no cover - protocol
        ...
