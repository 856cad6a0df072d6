"""
Output models public surface.

Re-exports the implementations under ``anthropic_task.base.models_parts``.
"""

from .models_parts.chat_result import ChatResult
from .models_parts.content_block import (
    ContentBlock,
    OtherSegment,
    TextSegment,
    ToolUseSegment,
    to_content_block,
)
from .models_parts.tool_use import ToolUse

__all__ = [
    "ChatResult",
    "ToolUse",
    "ContentBlock",
    "TextSegment",
    "ToolUseSegment",
    "OtherSegment",
    "to_content_block",
]
