"""Counter metric value emitted to the host's metrics sink."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict

COUNTER_TYPE = "counter"
TOKEN_UNIT = "token"


@dataclass(frozen=True)
class Counter:
    """A single named counter increment.

    Attributes:
        name: Metric name, e.g. ``"usage.input.tokens"``.
        value: Non-negative integer increment.
        unit: Unit label reported alongside the value.
        tags: Optional dimensions (model, provider) for the host to attach.
    """

    name: str
    value: int
    unit: str = TOKEN_UNIT
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return COUNTER_TYPE

    @classmethod
    def of(cls, name: str, value: int, **tags: str) -> "Counter":
        """Build a token counter, mirroring the host's ``Counter.of`` factory."""
        return cls(name=name, value=int(value), tags=dict(tags))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["type"] = self.type
        return data


__all__ = ["Counter", "COUNTER_TYPE", "TOKEN_UNIT"]
