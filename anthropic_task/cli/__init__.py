"""anthropic-task CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; performs no task
logic directly.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_examples, handle_run
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 2 invalid input, 1 other failure).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    args = p.parse_args(argv_list)
    if args.cmd == "examples":
        return handle_examples(args)
    if args.cmd == "run":
        return handle_run(args)
    p.print_help(sys.stderr)
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
