"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error mapping
"""

from __future__ import annotations

from pathlib import Path

import pytest

from apidrift.config.loader import PROJECT_CONFIG_NAME, _deep_merge, _load_yaml, load_config
from apidrift.core.errors import ConfigError, ErrorCode


@pytest.fixture
def global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config at a temp file and clear APIDRIFT__ env."""
    path = tmp_path / "global" / "config.yaml"
    path.parent.mkdir()
    monkeypatch.setattr("apidrift.config.loader.GLOBAL_CONFIG_PATH", path)
    for key in (
        "APIDRIFT__LOGGING__LEVEL",
        "APIDRIFT__INDEXER__TIMEOUT_SEC",
        "APIDRIFT__INDEXER__COMMAND",
        "APIDRIFT__REPORT__FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "project"
    path.mkdir()
    return path


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("indexer:\n  command: scip-go\n")

        assert _load_yaml(yaml_file) == {"indexer": {"command": "scip-go"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("indexer: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_override(self) -> None:
        base = {"indexer": {"command": "scip-go", "timeout_sec": 600}}
        override = {"indexer": {"timeout_sec": 60}}

        assert _deep_merge(base, override) == {"indexer": {"command": "scip-go", "timeout_sec": 60}}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": {"b": 1}}
        _deep_merge(base, {"a": {"b": 2}})

        assert base == {"a": {"b": 1}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, global_config: Path, project: Path) -> None:
        config = load_config(project)

        assert config.indexer.command == "scip-go"
        assert config.report.format == "text"

    def test_global_yaml(self, global_config: Path, project: Path) -> None:
        global_config.write_text("indexer:\n  timeout_sec: 120\n")

        assert load_config(project).indexer.timeout_sec == 120

    def test_project_overrides_global(self, global_config: Path, project: Path) -> None:
        global_config.write_text("indexer:\n  timeout_sec: 120\n  command: /opt/scip-go\n")
        (project / PROJECT_CONFIG_NAME).write_text("indexer:\n  timeout_sec: 30\n")

        config = load_config(project)

        assert config.indexer.timeout_sec == 30
        assert config.indexer.command == "/opt/scip-go"

    def test_env_overrides_yaml(
        self, global_config: Path, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (project / PROJECT_CONFIG_NAME).write_text("indexer:\n  timeout_sec: 30\n")
        monkeypatch.setenv("APIDRIFT__INDEXER__TIMEOUT_SEC", "900")

        assert load_config(project).indexer.timeout_sec == 900

    def test_kwargs_override_env(
        self, global_config: Path, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APIDRIFT__REPORT__FORMAT", "json")

        config = load_config(project, report={"format": "text"})

        assert config.report.format == "text"

    def test_invalid_value_raises_config_error(self, global_config: Path, project: Path) -> None:
        (project / PROJECT_CONFIG_NAME).write_text("indexer:\n  max_workers: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(project)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "max_workers" in exc_info.value.details["field"]

    def test_defaults_to_cwd(
        self, global_config: Path, project: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (project / PROJECT_CONFIG_NAME).write_text("report:\n  format: json\n")
        monkeypatch.chdir(project)

        assert load_config().report.format == "json"
