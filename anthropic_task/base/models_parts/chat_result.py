"""
ChatResult model: the normalized task output.

``to_dict`` renders the camelCase shape workflow definitions read
(``outputText``, ``toolUses`` ...); attribute names stay snake_case.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .tool_use import ToolUse


@dataclass(frozen=True)
class ChatResult:
    """Normalized result of one chat completion.

    Attributes:
        raw_response: Full provider response as compact JSON text.
        output_text: Order-preserving concatenation of every text block.
        tool_uses: Tool-use blocks in response order; ``None`` when there are none.
        stop_reason: Provider termination reason (``end_turn``, ``tool_use``,
            ``max_tokens`` ...).
    """

    raw_response: str
    output_text: str
    tool_uses: Optional[List[ToolUse]] = None
    stop_reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable output mapping (camelCase keys)."""
        return {
            "rawResponse": self.raw_response,
            "outputText": self.output_text,
            "toolUses": [t.to_dict() for t in self.tool_uses] if self.tool_uses else None,
            "stopReason": self.stop_reason,
        }


__all__ = ["ChatResult"]
