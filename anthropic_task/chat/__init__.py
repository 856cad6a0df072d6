"""Anthropic chat completion: request build, single call, response mapping."""

from .adapter import ChatRequestAdapter, validate_request
from .client import ClientFactory, create_client, default_client_factory
from .request_build import build_create_params
from .response_map import decode_tool_input, map_content, serialize_response

__all__ = [
    "ChatRequestAdapter",
    "validate_request",
    "ClientFactory",
    "create_client",
    "default_client_factory",
    "build_create_params",
    "decode_tool_input",
    "map_content",
    "serialize_response",
]
