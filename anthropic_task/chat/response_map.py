"""Messages API response flattening.

Walks the ordered content blocks of a response, concatenating text blocks
into one string and lifting tool-use blocks into ``ToolUse`` records, and
renders the full response as canonical JSON text.

Failure modes:
    - A tool-use input that cannot be decoded into a string-keyed mapping
      yields ``ToolUse(input=None)`` and is reported to ``on_decode_error``;
      the remaining blocks are still mapped.
    - A response that cannot be serialized raises ``SerializationError``.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ..base.errors import DecodeError, SerializationError
from ..base.models import (
    OtherSegment,
    TextSegment,
    ToolUse,
    ToolUseSegment,
    to_content_block,
)

DecodeErrorHandler = Callable[[int, ToolUseSegment, DecodeError], None]


def response_field(response: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from an SDK object or a plain mapping."""
    if isinstance(response, Mapping):
        return response.get(name, default)
    return getattr(response, name, default)


def decode_tool_input(raw: Any) -> Dict[str, Any]:
    """Decode a tool-use input payload into a plain JSON mapping.

    Accepts a mapping (or pydantic model) or a JSON object string. The value
    is round-tripped through JSON so the result only holds JSON types with
    string keys.

    Raises:
        DecodeError: When the payload is not a JSON object.
    """
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            parsed = json.loads(raw)
        elif isinstance(raw, Mapping):
            parsed = json.loads(json.dumps(dict(raw)))
        elif hasattr(raw, "model_dump"):
            parsed = json.loads(json.dumps(raw.model_dump(mode="json")))
        else:
            raise DecodeError(message=f"unsupported tool input type: {type(raw).__name__}")
    except (TypeError, ValueError) as e:
        raise DecodeError(message=f"tool input is not valid JSON: {e}", raw=e) from e
    if not isinstance(parsed, dict):
        raise DecodeError(message=f"tool input must be a JSON object, got {type(parsed).__name__}")
    return parsed


def map_content(
    blocks: Iterable[Any],
    on_decode_error: Optional[DecodeErrorHandler] = None,
) -> Tuple[str, List[ToolUse]]:
    """Split response blocks into ``(output_text, tool_uses)``.

    Text is concatenated without separators in block order; tool uses keep
    their own relative order. Other block types are skipped.
    """
    text_parts: List[str] = []
    tool_uses: List[ToolUse] = []
    for index, raw in enumerate(blocks):
        block = to_content_block(raw)
        if isinstance(block, TextSegment):
            text_parts.append(block.text)
        elif isinstance(block, ToolUseSegment):
            decoded: Optional[Dict[str, Any]]
            try:
                decoded = decode_tool_input(block.input)
            except DecodeError as err:
                decoded = None
                if on_decode_error is not None:
                    on_decode_error(index, block, err)
            tool_uses.append(ToolUse(id=block.id, name=block.name, input=decoded))
        elif isinstance(block, OtherSegment):
            continue
    return "".join(text_parts), tool_uses


def serialize_response(response: Any) -> str:
    """Render the full provider response as compact JSON text.

    Raises:
        SerializationError: If the response cannot be converted to JSON.
    """
    try:
        if hasattr(response, "model_dump"):
            data = response.model_dump(mode="json", by_alias=True)
        elif isinstance(response, Mapping):
            data = dict(response)
        elif dataclasses.is_dataclass(response) and not isinstance(response, type):
            data = dataclasses.asdict(response)
        else:
            raise SerializationError(
                message=f"unsupported response type: {type(response).__name__}"
            )
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    except SerializationError:
        raise
    except Exception as e:
        raise SerializationError(message=f"response is not serializable: {e}", raw=e) from e


__all__ = [
    "DecodeErrorHandler",
    "response_field",
    "decode_tool_input",
    "map_content",
    "serialize_response",
]
