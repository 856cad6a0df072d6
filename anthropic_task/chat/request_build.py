"""Messages API request construction.

Builds the keyword arguments for ``client.messages.create`` from a validated
``ChatRequestDTO``. Optional fields (``system``, ``top_p``, ``top_k``,
``tools``) are attached only when present; the provider never receives
``None`` or empty placeholders for them.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Sequence

from ..base.dto import ChatMessage, ChatRequestDTO, ToolDefinition


def build_message_params(messages: Sequence[ChatMessage]) -> List[Dict[str, Any]]:
    """Map chat turns to ``{"role", "content"}`` dicts, order preserved."""
    return [{"role": m.type.role, "content": m.content} for m in messages]


def build_tool_param(tool: ToolDefinition) -> Dict[str, Any]:
    """Translate one tool definition into the provider tool schema.

    Only ``properties`` and ``required`` are lifted out of the caller's
    schema; ``description`` is dropped when empty rather than sent as ``""``.
    """
    input_schema: Dict[str, Any] = {"type": "object"}
    schema = tool.input_schema
    if "properties" in schema:
        input_schema["properties"] = copy.deepcopy(schema["properties"])
        if "required" in schema:
            input_schema["required"] = list(schema["required"])
    param: Dict[str, Any] = {"name": tool.name, "input_schema": input_schema}
    if tool.description:
        param["description"] = tool.description
    return param


def build_tool_params(tools: Sequence[ToolDefinition]) -> List[Dict[str, Any]]:
    return [build_tool_param(t) for t in tools]


def build_create_params(request: ChatRequestDTO) -> Dict[str, Any]:
    """Return the ``messages.create`` keyword arguments for ``request``."""
    cfg = request.config
    params: Dict[str, Any] = {
        "model": cfg.model,
        "max_tokens": cfg.max_tokens,
        "temperature": cfg.temperature,
        "messages": build_message_params(request.messages),
    }
    if request.system:
        params["system"] = request.system
    if cfg.top_p is not None:
        params["top_p"] = cfg.top_p
    if cfg.top_k is not None:
        params["top_k"] = cfg.top_k
    if request.tools:
        params["tools"] = build_tool_params(request.tools)
    return params


__all__ = [
    "build_message_params",
    "build_tool_param",
    "build_tool_params",
    "build_create_params",
]
