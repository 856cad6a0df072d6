from __future__ import annotations

import pytest

from anthropic_task.base.cancellation import CancellationToken, CancelledError


def test_token_cancel_and_raise():
    tok = CancellationToken()
    assert not tok.cancelled  # nosec B101
    tok.raise_if_cancelled()
    tok.cancel("stop")
    assert tok.cancelled  # nosec B101
    assert tok.reason == "stop"  # nosec B101
    with pytest.raises(CancelledError, match="stop"):
        tok.raise_if_cancelled()


def test_parent_cancel_cascades_to_child():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("shutdown")
    assert child.cancelled  # nosec B101
    assert child.reason == "shutdown"  # nosec B101


def test_child_linked_after_cancel_is_cancelled():
    parent = CancellationToken()
    parent.cancel()
    late = CancellationToken(parent=parent)
    assert late.cancelled  # nosec B101
    with pytest.raises(CancelledError, match="operation cancelled"):
        late.raise_if_cancelled()
