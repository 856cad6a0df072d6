"""Shared fakes for the anthropic_task test suite.

The real ``anthropic`` client is never constructed; tests inject
``FakeClient`` through ``client_factory`` and inspect the recorded
``messages.create`` keyword arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import pytest

from anthropic_task.base.metrics import RecordingMetricsSink
from anthropic_task.config import reset_config_cache


@dataclass
class FakeTextBlock:
    text: str
    type: str = "text"

    def model_dump(self, **_: Any) -> Dict[str, Any]:
        return {"type": self.type, "text": self.text}


@dataclass
class FakeToolUseBlock:
    id: str
    name: str
    input: Any
    type: str = "tool_use"

    def model_dump(self, **_: Any) -> Dict[str, Any]:
        return {"type": self.type, "id": self.id, "name": self.name, "input": self.input}


@dataclass
class FakeThinkingBlock:
    thinking: str
    type: str = "thinking"

    def model_dump(self, **_: Any) -> Dict[str, Any]:
        return {"type": self.type, "thinking": self.thinking}


@dataclass
class FakeUsage:
    input_tokens: Optional[int] = 12
    output_tokens: Optional[int] = 7

    def model_dump(self, **_: Any) -> Dict[str, Any]:
        return {"input_tokens": self.input_tokens, "output_tokens": self.output_tokens}


@dataclass
class FakeMessage:
    """Minimal stand-in for ``anthropic.types.Message``."""

    content: List[Any] = field(default_factory=list)
    usage: Optional[FakeUsage] = field(default_factory=FakeUsage)
    stop_reason: Optional[str] = "end_turn"
    id: str = "msg_test_1"
    model: str = "claude-3-5-sonnet-20241022"
    role: str = "assistant"
    type: str = "message"

    def model_dump(self, **_: Any) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "role": self.role,
            "model": self.model,
            "content": [b.model_dump() for b in self.content],
            "stop_reason": self.stop_reason,
            "usage": self.usage.model_dump() if self.usage is not None else None,
        }


class _FakeMessages:
    def __init__(self, owner: "FakeClient") -> None:
        self._owner = owner

    def create(self, **kwargs: Any) -> Any:
        self._owner.calls.append(kwargs)
        if self._owner.error is not None:
            raise self._owner.error
        return self._owner.response


class FakeClient:
    """Records every ``messages.create`` call and returns a canned response.

    ``closed`` counts how often the adapter released the client.
    """

    def __init__(self, response: Any = None, error: Optional[BaseException] = None) -> None:
        self.response = response if response is not None else FakeMessage(
            content=[FakeTextBlock("Tokyo")]
        )
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.configs: List[Any] = []
        self.messages = _FakeMessages(self)
        self.closed = 0

    def close(self) -> None:
        self.closed += 1

    def factory(self) -> Callable[[Any], "FakeClient"]:
        def _build(config: Any) -> "FakeClient":
            self.configs.append(config)
            return self

        return _build


@pytest.fixture()
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def sink() -> RecordingMetricsSink:
    return RecordingMetricsSink()


@pytest.fixture()
def base_config() -> Dict[str, Any]:
    return {"api_key": "sk-ant-unit", "model": "claude-3-5-sonnet-20241022"}


@pytest.fixture()
def user_messages() -> List[Dict[str, str]]:
    return [{"type": "USER", "content": "What is the capital of Japan?"}]


@pytest.fixture(autouse=True)
def clean_task_env(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the developer's Anthropic environment."""
    for name in (
        "ANTHROPIC_API_KEY",
        "CLAUDE_API_KEY",
        "ANTHROPIC_MODEL",
        "ANTHROPIC_BASE_URL",
        "ANTHROPIC_MAX_TOKENS",
        "ANTHROPIC_TEMPERATURE",
        "ANTHROPIC_TASK_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
