"""Structured logging utilities for the task layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup across the adapter, task, and CLI modules.

All adapter events go through ``normalized_log_event`` which injects the
canonical keys ``structured``, ``phase``, ``attempt``, ``error_code``,
``emitted`` and ``tokens`` so downstream aggregation does not depend on which
code path produced the record.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "anthropic_task"
LOG_LEVEL_ENV = "ANTHROPIC_TASK_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_anthropic_task_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_anthropic_task_console_handler"
_FILE_HANDLER_ATTR = "_anthropic_task_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_FILE_MAX_BYTES = 10 * 1024 * 1024
_FILE_BACKUPS = 5


_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` or ``"WARN"`` to its constant.

    Unknown or empty names yield ``default``.
    """
    return _LEVEL_NAMES.get((value or "").strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``anthropic_task`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger

    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO
) -> logging.Logger:
    """Return a logger under the shared ``anthropic_task`` hierarchy.

    Child names are prefixed with the base logger name when needed so records
    always flow through the base handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def _sync_file_handler(logger: logging.Logger, file_path: Optional[str], json_mode: bool) -> None:
    """Keep at most one managed rotating file handler, pointed at ``file_path``."""
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    keep: Optional[logging.Handler] = None
    for h in [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]:
        if target is not None and keep is None and getattr(h, "baseFilename", None) == target:
            keep = h
            continue
        logger.removeHandler(h)
        with contextlib.suppress(OSError):
            h.close()
    if target is None:
        return
    if keep is None:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        keep = RotatingFileHandler(
            target, maxBytes=_FILE_MAX_BYTES, backupCount=_FILE_BACKUPS, encoding="utf-8"
        )
        setattr(keep, _FILE_HANDLER_ATTR, True)
        logger.addHandler(keep)
    keep.setLevel(logger.level)
    keep.setFormatter(_formatter(json_mode))


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``anthropic_task`` logger at runtime.

    Args:
        level: Numeric level or name; ``None`` keeps the current level.
        file_path: Also write to this rotating log file. ``None`` detaches a
            previously attached file handler.
        json_mode: JSON lines (default) or the plain text format.

    Returns:
        The base logger.
    """
    logger = get_logger(json_mode=json_mode)
    if isinstance(level, str):
        logger.setLevel(_parse_level(level, default=logger.level))
    elif level is not None:
        logger.setLevel(level)
    for h in logger.handlers:
        h.setLevel(logger.level)
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setFormatter(_formatter(json_mode))
    _sync_file_handler(logger, file_path, json_mode)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON line.

    Keys whose values are ``None`` are dropped unless ``keep_none`` is set.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "structured",
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Optional[Dict[str, Any]]:
    if tokens is None or isinstance(tokens, Mapping):
        return dict(tokens) if tokens is not None else None
    return {"value": repr(tokens)}


def normalized_log_event(  # noqa: PLR0913
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    attempt: int | None = None,
    error_code: str | None = None,
    emitted: bool | None = None,
    tokens: Any = None,
    structured: bool = True,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit ``event`` with every key of ``REQUIRED_NORMALIZED_KEYS``.

    ``error_code`` is left out when ``None`` ("no error"); the other
    normalized keys are always present, possibly as ``null``. ``None``-valued
    extra fields are dropped.
    """
    fields: Dict[str, Any] = {
        "structured": structured,
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    fields.update({k: v for k, v in extra_fields.items() if v is not None})
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
