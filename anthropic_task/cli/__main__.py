"""Allows running the CLI via ``python -m anthropic_task.cli [args]``."""

from __future__ import annotations

from . import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
