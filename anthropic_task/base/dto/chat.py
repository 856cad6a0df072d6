"""
Pydantic DTOs and validators for inbound chat requests.

Purpose
-------
Validate the fully rendered task inputs before the adapter builds a provider
request, so every precondition fails fast with no network traffic:

* ``GenerationConfig``: credentials, model id and sampling parameters.
* ``ChatMessage``: one conversation turn (``USER`` or ``ASSISTANT``).
* ``ToolDefinition``: a caller-declared tool with a JSON-Schema input contract.
* ``ChatRequestDTO``: the whole request, enforcing cross-field rules
  (non-empty message list, unique tool names).

External dependencies: Pydantic only. Validation either succeeds or raises a
``pydantic.ValidationError``; the adapter converts that into its own
``ValidationError``.

Field names are snake_case; the camelCase spelling used by workflow
definitions (``apiKey``, ``maxTokens``, ``topP``, ``inputSchema`` ...) is
accepted as an alias.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ...config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE

TOOL_NAME_MAX_LENGTH = 128


class ChatMessageType(str, Enum):
    """Author of a chat turn; the value is the workflow-facing token."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"

    @property
    def role(self) -> str:
        """Role token expected by the Messages API."""
        return self.value.lower()

    @classmethod
    def _missing_(cls, value: object) -> Optional["ChatMessageType"]:
        if isinstance(value, str):
            upper = value.strip().upper()
            for member in cls:
                if member.value == upper:
                    return member
        return None


class GenerationConfig(BaseModel):
    """Immutable per-invocation generation settings.

    Attributes:
        api_key: Anthropic API key (never included in reprs or logs).
        model: Claude model identifier, e.g. ``claude-3-5-sonnet-20241022``.
        max_tokens: Upper bound on generated tokens; defaults to 1024.
        temperature: Sampling randomness in [0, 1]; defaults to 1.0.
        top_p: Optional nucleus sampling cap.
        top_k: Optional top-K sampling cap.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    api_key: str = Field(..., min_length=1, repr=False)
    model: str = Field(..., min_length=1)
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, gt=0)
    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=1.0)
    top_p: Optional[float] = None
    top_k: Optional[int] = None

    @field_validator("api_key", "model")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ChatMessage(BaseModel):
    """A single conversation turn."""

    model_config = ConfigDict(frozen=True)

    type: ChatMessageType
    content: str

    @property
    def role(self) -> str:
        return self.type.role


class ToolDefinition(BaseModel):
    """Caller-declared tool the model may request to invoke.

    ``input_schema`` is a JSON-Schema object; only its ``properties`` and
    ``required`` members are forwarded to the provider.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=TOOL_NAME_MAX_LENGTH)
    description: Optional[str] = None
    input_schema: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("input_schema", "inputSchema"),
    )

    @field_validator("input_schema")
    @classmethod
    def _validate_schema(cls, schema: Dict[str, Any]) -> Dict[str, Any]:
        properties = schema.get("properties")
        if properties is not None and not isinstance(properties, dict):
            raise ValueError("input_schema.properties must be a mapping")
        required = schema.get("required")
        if required is not None and (
            not isinstance(required, list) or not all(isinstance(r, str) for r in required)
        ):
            raise ValueError("input_schema.required must be a list of property names")
        return schema


class ChatRequestDTO(BaseModel):
    """Complete validated request handed to the adapter's request builder."""

    model_config = ConfigDict(frozen=True)

    config: GenerationConfig
    messages: List[ChatMessage] = Field(..., min_length=1)
    system: Optional[str] = None
    tools: Optional[List[ToolDefinition]] = None

    @model_validator(mode="after")
    def _unique_tool_names(self) -> "ChatRequestDTO":
        """Reject requests declaring the same tool name twice."""
        if self.tools:
            seen: set[str] = set()
            for tool in self.tools:
                if tool.name in seen:
                    raise ValueError(f"duplicate tool name: {tool.name!r}")
                seen.add(tool.name)
        return self


__all__ = [
    "ChatMessageType",
    "GenerationConfig",
    "ChatMessage",
    "ToolDefinition",
    "ChatRequestDTO",
    "TOOL_NAME_MAX_LENGTH",
]
