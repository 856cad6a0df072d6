"""Typed structural Protocols for the provider SDK objects we read.

Importing these never requires the SDK itself, so helpers and tests can type
against them with plain fakes.
"""

from .stubs_parts.anthropic import (
    AnthropicMessage,
    AnthropicTextBlock,
    AnthropicToolUseBlock,
    AnthropicUsage,
    HasAnthropicUsage,
)

__all__ = [
    "AnthropicMessage",
    "AnthropicTextBlock",
    "AnthropicToolUseBlock",
    "AnthropicUsage",
    "HasAnthropicUsage",
]
