"""Anthropic-style usage protocol types."""

from __future__ import annotations

from typing import Optional, Protocol


class AnthropicUsage(Protocol):
    """Protocol for Anthropic usage object.

    Attributes:
        input_tokens: Count of input (prompt) tokens.
        output_tokens: Count of generated (completion) tokens.
    """

    input_tokens: Optional[int]
    output_tokens: Optional[int]


class HasAnthropicUsage(Protocol):
    """Protocol for objects exposing an ``usage`` attribute compatible with Anthropic."""

    usage: AnthropicUsage
