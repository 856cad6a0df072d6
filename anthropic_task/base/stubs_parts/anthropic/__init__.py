"""Anthropic SDK structural protocols."""

from .anthropic_content_block import AnthropicTextBlock, AnthropicToolUseBlock
from .anthropic_message import AnthropicMessage
from .anthropic_usage import AnthropicUsage, HasAnthropicUsage

__all__ = [
    "AnthropicTextBlock",
    "AnthropicToolUseBlock",
    "AnthropicMessage",
    "AnthropicUsage",
    "HasAnthropicUsage",
]
