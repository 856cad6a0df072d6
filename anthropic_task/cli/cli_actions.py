"""CLI action handlers.

Purpose
-------
Load a task definition from disk, run it with a :class:`LocalRunContext` and
print the result, keeping the entrypoint module a thin dispatcher.

Fallback & Error Semantics
--------------------------
- Unreadable or malformed definition files and ``ValidationError`` return
  ``2`` with a JSON error on stderr; no request is sent.
- Any other ``AdapterError`` returns ``1`` and is printed the same way.
- ``CancelledError`` is not caught here.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from ..base.errors import AdapterError, ValidationError
from ..base.logging import configure_logger
from ..task import ChatCompletion, LocalRunContext
from ..task_metadata import EXAMPLES, describe


def load_definition(path: str) -> Dict[str, Any]:
    """Read a YAML/JSON file and return the task definition mapping.

    A flow document (``tasks: [...]``) yields its first task entry.

    Raises:
        ValidationError: If the file is missing, unparsable or not a mapping.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ValidationError(message=f"cannot read {path}: {e}", raw=e) from e
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValidationError(message=f"cannot parse {path}: {e}", raw=e) from e
    if isinstance(data, Mapping) and isinstance(data.get("tasks"), list):
        tasks = data["tasks"]
        if not tasks:
            raise ValidationError(message=f"{path}: 'tasks' is empty")
        data = tasks[0]
    if not isinstance(data, Mapping):
        raise ValidationError(message=f"{path}: task definition must be a mapping")
    return dict(data)


def _print_error(err: AdapterError) -> None:
    payload = {"error": err.message, "code": err.code.value}
    if err.model:
        payload["model"] = err.model
    print(json.dumps(payload), file=sys.stderr)


def handle_run(args: argparse.Namespace) -> int:
    """Execute the ``run`` subcommand.

    Returns ``0`` on success, ``2`` on validation errors and ``1`` on any
    other adapter error. The result JSON and recorded counters go to stdout.
    """
    configure_logger(level=args.log_level, file_path=args.log_file)
    ctx = LocalRunContext(timeout=args.timeout, log_metrics=True)
    try:
        task = ChatCompletion.from_definition(load_definition(args.file))
        result = task.run(ctx)
    except ValidationError as e:
        _print_error(e)
        return 2
    except AdapterError as e:
        _print_error(e)
        return 1
    out = {
        "output": result.to_dict(),
        "metrics": [c.to_dict() for c in ctx.metrics.counters],
    }
    print(json.dumps(out, ensure_ascii=False, indent=2))
    return 0


def handle_examples(args: argparse.Namespace) -> int:
    if args.json:
        print(json.dumps(describe(), ensure_ascii=False, indent=2))
        return 0
    for ex in EXAMPLES:
        print(f"# {ex.title}")
        print(ex.code)
    return 0


__all__ = ["load_definition", "handle_run", "handle_examples"]
