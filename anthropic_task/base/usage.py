"""Token usage extraction helpers.

Converts the usage summary of an Anthropic response into the canonical
mapping used for counters and structured logging:

    {"input": <int|None>, "output": <int|None>, "total": <int|None>}

Both attribute-style SDK objects and plain mappings are accepted. Values that
are missing, negative or not coercible to ``int`` become ``None``; the
function itself never raises.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, cast

from .stubs import HasAnthropicUsage

CanonicalUsage = Dict[str, Optional[int]]

PLACEHOLDER_USAGE: CanonicalUsage = {"input": None, "output": None, "total": None}


def _coerce_int(value: Any) -> Optional[int]:
    """Coerce arbitrary value to a non-negative ``int`` or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    try:
        iv = int(value)
    except (TypeError, ValueError):
        return None
    return iv if iv >= 0 else None


def extract_usage(raw_response: Any) -> CanonicalUsage:
    """Extract input/output token counts from a raw response.

    ``total`` is derived only when both components are known.
    """
    if raw_response is None:
        return PLACEHOLDER_USAGE.copy()

    if isinstance(raw_response, Mapping):
        usage_obj: Any = raw_response.get("usage")
    else:
        usage_obj = getattr(cast(HasAnthropicUsage, raw_response), "usage", None)

    if isinstance(usage_obj, Mapping):
        input_tokens = _coerce_int(usage_obj.get("input_tokens"))
        output_tokens = _coerce_int(usage_obj.get("output_tokens"))
    else:
        input_tokens = _coerce_int(getattr(usage_obj, "input_tokens", None))
        output_tokens = _coerce_int(getattr(usage_obj, "output_tokens", None))

    total = None
    if input_tokens is not None and output_tokens is not None:
        total = input_tokens + output_tokens
    return {"input": input_tokens, "output": output_tokens, "total": total}


__all__ = ["CanonicalUsage", "PLACEHOLDER_USAGE", "extract_usage"]
