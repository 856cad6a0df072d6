"""Layered configuration for the chat task.

Sources are merged in a predictable order (later wins):

1. Built-in defaults (``max_tokens``, ``temperature``)
2. Environment variables (``ANTHROPIC_API_KEY``, ``ANTHROPIC_MODEL``,
   ``ANTHROPIC_BASE_URL``, ``ANTHROPIC_MAX_TOKENS``, ``ANTHROPIC_TEMPERATURE``)
3. Optional external file named by ``ANTHROPIC_TASK_CONFIG_FILE`` (JSON first,
   YAML otherwise). Either a flat mapping or one nested under ``anthropic:``::

       anthropic:
         model: claude-3-5-sonnet-20241022
         max_tokens: 2048
         base_url: https://api.anthropic.com

4. In-code overrides passed to :func:`get_task_config`

The task layer only uses the merged values for properties its definition
leaves unset.

Public API
----------
* get_task_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..base.errors import ValidationError
from .defaults import CONFIG_FILE_ENV, DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, PROVIDER_NAME
from .env import ENV_MAP, is_placeholder, resolve_env_value

DEFAULTS: Dict[str, Any] = {
    "max_tokens": DEFAULT_MAX_TOKENS,
    "temperature": DEFAULT_TEMPERATURE,
}

_NUMERIC_FIELDS = {"max_tokens": int, "temperature": float}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _read_config_file(path: str) -> Dict[str, Any]:
    """Parse the config file at ``path`` (JSON first, YAML otherwise).

    A missing file yields ``{}``.

    Raises:
        ValidationError: If the file exists but cannot be read or parsed.
    """
    p = Path(path)
    if not p.is_file():
        return {}
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(message=f"cannot read config file {path}: {e}", raw=e) from e
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValidationError(message=f"cannot parse config file {path}: {e}", raw=e) from e
    if not isinstance(data, dict):
        return {}
    section = data.get(PROVIDER_NAME, data)
    if not isinstance(section, dict):
        return {}
    return {k: v for k, v in section.items() if v is not None}


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the optional config file.

    The cache is keyed on the path so tests and long-lived hosts pick up a
    changed ``ANTHROPIC_TASK_CONFIG_FILE``. It is only filled after a
    successful parse, so a broken file fails on every call.
    """
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    loaded = _read_config_file(path) if path else {}
    _FILE_CACHE, _FILE_CACHE_PATH = loaded, path
    return loaded


def _env_layer() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field in ENV_MAP:
        value, _ = resolve_env_value(field)
        if value is None:
            continue
        caster = _NUMERIC_FIELDS.get(field)
        if caster is not None:
            try:
                out[field] = caster(value)
            except ValueError:
                continue
        else:
            out[field] = value
    return out


def reset_config_cache() -> None:
    """Forget the cached config file contents."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def get_task_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping.

    Placeholder strings (``changeme``, ``placeholder`` ...) coming from the
    file or overrides are ignored so they never mask a real environment value.

    Raises:
        ValidationError: If the configured file cannot be read or parsed.
    """
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg.update(_env_layer())
    for layer in (_load_external_config(), overrides or {}):
        for k, v in layer.items():
            if v is None or (isinstance(v, str) and is_placeholder(v)):
                continue
            cfg[k] = v
    return cfg


__all__ = ["DEFAULTS", "get_task_config", "reset_config_cache"]
