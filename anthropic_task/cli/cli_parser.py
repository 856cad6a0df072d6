"""CLI parser construction for anthropic-task.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser with ``run`` and ``examples`` subcommands."""
    p = argparse.ArgumentParser(
        prog="anthropic-task", description="Run a Claude chat completion task definition locally"
    )
    sub = p.add_subparsers(dest="cmd")

    p_run = sub.add_parser("run", help="Execute a task definition file (YAML or JSON)")
    p_run.add_argument("file", help="Task definition, or a flow whose first task is used")
    p_run.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    p_run.add_argument("--log-file", default=None, help="Also write JSON logs to this file")
    p_run.add_argument(
        "--timeout", type=float, default=None, help="Request timeout in seconds (none by default)"
    )

    p_ex = sub.add_parser("examples", help="Print the bundled example task definitions")
    p_ex.add_argument("--json", action="store_true", help="Emit the full metadata as JSON")

    return p


__all__ = ["build_parser"]
