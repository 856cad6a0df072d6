from __future__ import annotations

import importlib
import json
import logging

import pytest
from conftest import FakeClient, FakeMessage, FakeTextBlock

from anthropic_task.base.errors import ValidationError
from anthropic_task.chat import client as client_module
from anthropic_task.cli import main
from anthropic_task.cli.cli_actions import load_definition
from anthropic_task.cli.cli_parser import build_parser

FLOW = """\
id: anthropic_chat_completion
namespace: company.team

tasks:
  - id: chat_completion
    type: anthropic_task.ChatCompletion
    apiKey: sk-ant-cli
    model: claude-3-5-sonnet-20241022
    messages:
      - type: USER
        content: "What is the capital of Japan?"
"""


@pytest.fixture()
def patched_sdk(monkeypatch: pytest.MonkeyPatch) -> FakeClient:
    """Replace SDK client construction with a fake."""
    fake = FakeClient(response=FakeMessage(content=[FakeTextBlock("Tokyo")]))
    monkeypatch.setattr(client_module, "create_client", lambda config, base_url=None: fake)
    return fake


def test_parser_run_flags():
    args = build_parser().parse_args(["run", "flow.yaml", "--timeout", "5", "--log-level", "DEBUG"])
    assert args.cmd == "run"  # nosec B101 - pytest assertion in tests
    assert args.file == "flow.yaml"  # nosec B101 - pytest assertion in tests
    assert args.timeout == 5.0  # nosec B101 - pytest assertion in tests


def test_load_definition_flow_and_mapping(tmp_path):
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")
    assert load_definition(str(flow))["id"] == "chat_completion"  # nosec B101 - pytest assertion in tests

    single = tmp_path / "task.json"
    single.write_text(json.dumps({"model": "m", "messages": []}), encoding="utf-8")
    assert load_definition(str(single))["model"] == "m"  # nosec B101 - pytest assertion in tests


@pytest.mark.parametrize("text", ["- just\n- a list\n", "tasks: []\n"])
def test_load_definition_rejects_bad_shapes(tmp_path, text):
    path = tmp_path / "bad.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ValidationError):
        load_definition(str(path))


def test_load_definition_missing_file(tmp_path):
    with pytest.raises(ValidationError):
        load_definition(str(tmp_path / "nope.yaml"))


def test_run_prints_result_and_metrics(tmp_path, capsys, patched_sdk):
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")
    rc = main(["run", str(flow), "--timeout", "9"])
    assert rc == 0  # nosec B101 - pytest assertion in tests
    out = json.loads(capsys.readouterr().out)
    assert out["output"]["outputText"] == "Tokyo"  # nosec B101 - pytest assertion in tests
    assert out["output"]["toolUses"] is None  # nosec B101 - pytest assertion in tests
    assert [m["name"] for m in out["metrics"]] == ["usage.input.tokens", "usage.output.tokens"]  # nosec B101 - pytest assertion in tests
    assert patched_sdk.calls[0]["timeout"] == 9.0  # nosec B101 - pytest assertion in tests


def test_run_validation_error_exit_code(tmp_path, capsys, patched_sdk):
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW.replace("apiKey: sk-ant-cli", "apiKey: ''"), encoding="utf-8")
    rc = main(["run", str(flow)])
    assert rc == 2  # nosec B101 - pytest assertion in tests
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["code"] == "validation"  # nosec B101 - pytest assertion in tests
    assert patched_sdk.calls == []  # nosec B101 - pytest assertion in tests


def test_run_transport_error_exit_code(tmp_path, capsys, patched_sdk):
    patched_sdk.error = RuntimeError("rate limit reached")
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")
    rc = main(["run", str(flow)])
    assert rc == 1  # nosec B101 - pytest assertion in tests
    err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert err["code"] == "rate_limit"  # nosec B101 - pytest assertion in tests


def test_examples_subcommand(capsys):
    assert main(["examples"]) == 0  # nosec B101 - pytest assertion in tests
    assert "Structured output using tool use." in capsys.readouterr().out  # nosec B101 - pytest assertion in tests
    assert main(["examples", "--json"]) == 0  # nosec B101 - pytest assertion in tests
    doc = json.loads(capsys.readouterr().out)
    assert len(doc["examples"]) == 4  # nosec B101 - pytest assertion in tests


def test_no_subcommand_prints_help():
    assert main([]) == 2  # nosec B101 - pytest assertion in tests


def test_cli_modules_import():
    actions = importlib.import_module("anthropic_task.cli.cli_actions")
    assert actions.ChatCompletion.__name__ == "ChatCompletion"  # nosec B101 - pytest assertion in tests
    assert callable(importlib.import_module("anthropic_task.cli.__main__").main)  # nosec B101 - pytest assertion in tests


def test_run_logs_metric_counters(tmp_path, capsys, caplog, patched_sdk):
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="anthropic_task"):
        rc = main(["run", str(flow)])
    assert rc == 0  # nosec B101 - pytest assertion in tests
    events = [json.loads(r.getMessage()) for r in caplog.records if r.name.startswith("anthropic_task")]
    logged = [(e["name"], e["value"]) for e in events if e["event"] == "metrics.counter"]
    assert logged == [("usage.input.tokens", 12), ("usage.output.tokens", 7)]  # nosec B101 - pytest assertion in tests
    out = json.loads(capsys.readouterr().out)
    assert [(m["name"], m["value"]) for m in out["metrics"]] == logged  # nosec B101 - pytest assertion in tests
    assert patched_sdk.closed == 1  # nosec B101 - pytest assertion in tests


def test_run_broken_config_file_exit_code(tmp_path, capsys, monkeypatch, patched_sdk):
    broken = tmp_path / "broken.yaml"
    broken.write_text("anthropic: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(broken))
    flow = tmp_path / "flow.yaml"
    flow.write_text(FLOW, encoding="utf-8")
    for _ in range(2):
        assert main(["run", str(flow)]) == 2  # nosec B101 - pytest assertion in tests
        err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert err["code"] == "validation"  # nosec B101 - pytest assertion in tests
        assert str(broken) in err["error"]  # nosec B101 - pytest assertion in tests
    assert patched_sdk.calls == []  # nosec B101 - pytest assertion in tests
