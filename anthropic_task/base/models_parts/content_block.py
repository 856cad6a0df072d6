"""
Tagged variant over response content blocks.

The SDK returns a polymorphic list of blocks discriminated by ``type``. Each
raw block is normalized exactly once into one of the variants below so the
response mapper dispatches on the variant class instead of probing optional
attributes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union

from ..stubs import AnthropicTextBlock, AnthropicToolUseBlock


@dataclass(frozen=True)
class TextSegment:
    text: str
    type: Literal["text"] = "text"


@dataclass(frozen=True)
class ToolUseSegment:
    id: str
    name: str
    input: Any
    type: Literal["tool_use"] = "tool_use"


@dataclass(frozen=True)
class OtherSegment:
    """Any block type the task does not surface (thinking, server tools ...)."""

    block_type: str
    type: Literal["other"] = "other"


ContentBlock = Union[TextSegment, ToolUseSegment, OtherSegment]


def _field(raw: Any, name: str, default: Any = None) -> Any:
    if isinstance(raw, Mapping):
        return raw.get(name, default)
    return getattr(raw, name, default)


def to_content_block(
    raw: Union[AnthropicTextBlock, AnthropicToolUseBlock, Mapping[str, Any]],
) -> ContentBlock:
    """Normalize an SDK block (object or mapping) into a ``ContentBlock``."""
    block_type = _field(raw, "type")
    if block_type == "text":
        return TextSegment(text=_field(raw, "text") or "")
    if block_type == "tool_use":
        return ToolUseSegment(
            id=_field(raw, "id") or "",
            name=_field(raw, "name") or "",
            input=_field(raw, "input"),
        )
    return OtherSegment(block_type=str(block_type))


__all__ = [
    "TextSegment",
    "ToolUseSegment",
    "OtherSegment",
    "ContentBlock",
    "to_content_block",
]
