"""DTO validation package for chat inputs."""

from .chat import (
    TOOL_NAME_MAX_LENGTH,
    ChatMessage,
    ChatMessageType,
    ChatRequestDTO,
    GenerationConfig,
    ToolDefinition,
)

__all__ = [
    "ChatMessage",
    "ChatMessageType",
    "ChatRequestDTO",
    "GenerationConfig",
    "ToolDefinition",
    "TOOL_NAME_MAX_LENGTH",
]
