"""
ToolUse model: one tool invocation requested by the model.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ToolUse:
    """A tool-use block lifted out of the response.

    Attributes:
        id: Provider-assigned tool-use id (echoed back in a ``tool_result``).
        name: Name of the tool the model wants to call.
        input: Decoded arguments, or ``None`` when the payload could not be
            decoded into a string-keyed mapping.
    """

    id: str
    name: str
    input: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "input": self.input}


__all__ = ["ToolUse"]
