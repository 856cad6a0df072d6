"""anthropic_task.config.defaults
==============================

Central place for small, stable default values. They can be overridden via
environment variables, an external config file, or explicit task properties.

This module intentionally imports nothing from the rest of the package to
avoid circular imports; only plain constants live here.
"""

from __future__ import annotations

PROVIDER_NAME = "anthropic"

# ---- Generation defaults ----
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 1.0

# ---- Transport ----
# The adapter issues exactly one request per invocation; SDK-level retries
# are disabled. Timeouts come from the caller only.
SDK_MAX_RETRIES = 0

# ---- Metrics ----
INPUT_TOKENS_METRIC = "usage.input.tokens"
OUTPUT_TOKENS_METRIC = "usage.output.tokens"

# ---- Config file ----
CONFIG_FILE_ENV = "ANTHROPIC_TASK_CONFIG_FILE"

__all__ = [
    "PROVIDER_NAME",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "SDK_MAX_RETRIES",
    "INPUT_TOKENS_METRIC",
    "OUTPUT_TOKENS_METRIC",
    "CONFIG_FILE_ENV",
]
