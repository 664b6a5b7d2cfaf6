"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.config import ensure_runtime_dirs, load_effective_config, load_yaml, merge_dicts


def test_missing_config_falls_back_to_defaults(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config["paths"]["db_path"] == "workspace/app.db"
    assert config["updates"]["providers"] == []


def test_local_config_overrides_default(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "paths:\n  db_path: data/main.db\nlogging:\n  level: DEBUG\n", encoding="utf-8"
    )
    (config_dir / "local.yaml").write_text("logging:\n  level: WARNING\n", encoding="utf-8")

    config = load_effective_config(tmp_path)

    assert config["paths"]["db_path"] == "data/main.db"
    assert config["paths"]["audit_log_path"] == "logs/updates.jsonl"
    assert config["logging"]["level"] == "WARNING"


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_yaml(path)


def test_merge_dicts_is_recursive_and_non_destructive() -> None:
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    merged = merge_dicts(base, {"a": {"c": 5}})

    assert merged == {"a": {"b": 1, "c": 5}, "d": 3}
    assert base["a"]["c"] == 2


def test_runtime_dirs_are_created(tmp_path: Path) -> None:
    paths = ensure_runtime_dirs(
        tmp_path, {"paths": {"db_path": "var/db/app.db", "audit_log_path": "var/log/a.jsonl"}}
    )

    assert paths["db_path"] == (tmp_path / "var/db/app.db").resolve()
    assert paths["db_path"].parent.is_dir()
    assert paths["audit_log_path"].parent.is_dir()
