from __future__ import annotations

import json

import pytest

from anthropic_task.base.errors import ValidationError
from anthropic_task.config import DEFAULTS, get_task_config, reset_config_cache
from anthropic_task.config.env import (
    ENV_ALIASES,
    ENV_MAP,
    get_env_var_candidates,
    is_placeholder,
    resolve_env_value,
)


def test_env_map_contains_expected_keys():
    for field in ["api_key", "model", "base_url", "max_tokens", "temperature"]:
        assert field in ENV_MAP
    assert ENV_ALIASES["api_key"][0] == "ANTHROPIC_API_KEY"


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")
    assert is_placeholder("ChangeMe123")
    assert is_placeholder("example-key")
    assert is_placeholder("test_token")
    assert not is_placeholder("sk-ant-real")
    assert not is_placeholder(None)


def test_candidates_canonical_first():
    assert list(get_env_var_candidates("api_key")) == ["ANTHROPIC_API_KEY", "CLAUDE_API_KEY"]
    assert list(get_env_var_candidates("unknown")) == []


def test_resolve_env_value_alias_and_placeholder(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "changeme")
    monkeypatch.setenv("CLAUDE_API_KEY", "sk-ant-alias")
    assert resolve_env_value("api_key") == ("sk-ant-alias", "CLAUDE_API_KEY")


def test_defaults_only():
    cfg = get_task_config()
    assert cfg == DEFAULTS
    assert cfg["max_tokens"] == 1024
    assert cfg["temperature"] == 1.0


def test_env_layer_casts_numbers(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-3-5-haiku-20241022")
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "2048")
    monkeypatch.setenv("ANTHROPIC_TEMPERATURE", "0.2")
    cfg = get_task_config()
    assert cfg["model"] == "claude-3-5-haiku-20241022"
    assert cfg["max_tokens"] == 2048
    assert cfg["temperature"] == 0.2


def test_env_layer_ignores_non_numeric(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ANTHROPIC_MAX_TOKENS", "lots")
    assert get_task_config()["max_tokens"] == 1024


def test_yaml_file_layer_over_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    path = tmp_path / "task.yaml"
    path.write_text(
        "anthropic:\n  model: claude-from-file\n  max_tokens: 512\n  base_url: https://gateway.local\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ANTHROPIC_MODEL", "claude-from-env")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(path))
    cfg = get_task_config()
    assert cfg["model"] == "claude-from-file"
    assert cfg["max_tokens"] == 512
    assert cfg["base_url"] == "https://gateway.local"


def test_json_file_flat_mapping_and_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path):
    path = tmp_path / "task.json"
    path.write_text(json.dumps({"model": "claude-json", "temperature": 0.4}), encoding="utf-8")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(path))
    cfg = get_task_config({"temperature": 0.9, "model": "placeholder-model"})
    assert cfg["temperature"] == 0.9
    assert cfg["model"] == "claude-json"


def test_file_cache_reset(monkeypatch: pytest.MonkeyPatch, tmp_path):
    path = tmp_path / "task.json"
    path.write_text(json.dumps({"model": "one"}), encoding="utf-8")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(path))
    assert get_task_config()["model"] == "one"
    path.write_text(json.dumps({"model": "two"}), encoding="utf-8")
    assert get_task_config()["model"] == "one"
    reset_config_cache()
    assert get_task_config()["model"] == "two"


def test_missing_config_file_ignored(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_task_config() == DEFAULTS


def test_broken_config_file_fails_every_call(monkeypatch: pytest.MonkeyPatch, tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("anthropic: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(path))
    for _ in range(2):
        with pytest.raises(ValidationError) as ei:
            get_task_config()
        assert str(path) in ei.value.message
        assert ei.value.code.value == "validation"


def test_fixed_config_file_loads_after_failure(monkeypatch: pytest.MonkeyPatch, tmp_path):
    path = tmp_path / "task.yaml"
    path.write_text("anthropic: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("ANTHROPIC_TASK_CONFIG_FILE", str(path))
    with pytest.raises(ValidationError):
        get_task_config()
    path.write_text("anthropic:\n  model: claude-fixed\n", encoding="utf-8")
    assert get_task_config()["model"] == "claude-fixed"
