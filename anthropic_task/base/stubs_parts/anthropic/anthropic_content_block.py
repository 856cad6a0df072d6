"""Anthropic content block protocols.

Only the attributes read by the response mapper are declared.
"""

from __future__ import annotations

from typing import Any, Literal, Protocol


class AnthropicTextBlock(Protocol):
    """A ``text`` content block."""

    type: Literal["text"]
    text: str


class AnthropicToolUseBlock(Protocol):
    """A ``tool_use`` content block; ``input`` is the SDK's native value."""

    type: Literal["tool_use"]
    id: str
    name: str
    input: Any
