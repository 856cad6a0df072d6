"""anthropic_task.config.env
=========================

Environment variable mapping for task settings.

Design Notes
------------
- ``ENV_MAP`` maps a config field to its canonical variable; ``ENV_ALIASES``
  lists accepted alternates, canonical first.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_MAP: Dict[str, str] = {
    "api_key": "ANTHROPIC_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "model": "ANTHROPIC_MODEL",
    "base_url": "ANTHROPIC_BASE_URL",
    "max_tokens": "ANTHROPIC_MAX_TOKENS",
    "temperature": "ANTHROPIC_TEMPERATURE",
}

ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "api_key": ("ANTHROPIC_API_KEY", "CLAUDE_API_KEY"),
}


_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "example")


def is_placeholder(val: Optional[str]) -> bool:
    """Whether ``val`` looks like a dummy value rather than a real setting.

    Matches ``placeholder``, ``changeme`` and ``example`` anywhere, and a
    ``test_`` prefix, ignoring case and surrounding whitespace.
    """
    if val is None:
        return False
    lowered = str(val).strip().lower()
    return lowered.startswith("test_") or any(m in lowered for m in _PLACEHOLDER_MARKERS)


def get_env_var_candidates(field: str) -> Iterable[str]:
    """Yield acceptable environment variable names for a field, canonical first."""
    canonical = ENV_MAP.get(field)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(field, ()):
        if alias != canonical:
            yield alias


def resolve_env_value(field: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first usable variable.

    Empty and placeholder values are skipped. ``(None, None)`` when nothing
    is set.
    """
    for name in get_env_var_candidates(field):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_env_value",
]
