"""Anthropic SDK client construction.

The adapter never builds SDK clients itself; it calls a ``ClientFactory`` so
hosts and tests can inject their own transport. The default factory returns
a synchronous ``anthropic.Anthropic`` client with SDK retries disabled, since
each task execution is a single attempt. A factory returns a fresh client per
call; the adapter closes it (when it has ``close``) once the call returns.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import anthropic

from ..base.dto import GenerationConfig
from ..config.defaults import SDK_MAX_RETRIES

ClientFactory = Callable[[GenerationConfig], Any]


def create_client(config: GenerationConfig, *, base_url: Optional[str] = None) -> anthropic.Anthropic:
    """Instantiate the Anthropic SDK client for one invocation.

    Args:
        config: Validated generation settings carrying the API key.
        base_url: Optional API endpoint override (proxies, gateways).
    """
    kwargs: dict[str, Any] = {"api_key": config.api_key, "max_retries": SDK_MAX_RETRIES}
    if base_url:
        kwargs["base_url"] = base_url
    return anthropic.Anthropic(**kwargs)


def default_client_factory(base_url: Optional[str] = None) -> ClientFactory:
    """Return a ``ClientFactory`` bound to ``base_url``."""

    def _factory(config: GenerationConfig) -> anthropic.Anthropic:
        return create_client(config, base_url=base_url)

    return _factory


__all__ = ["ClientFactory", "create_client", "default_client_factory"]
