"""
Tests for rules.yaml loading and startup validation.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from smartlink.adapters.local_storage import LocalFileStore
from smartlink.adapters.memory_storage import InMemoryKeyValueStore
from smartlink.adapters.sqlite_kv import SQLiteKeyValueStore
from smartlink.app_shell.config import create_storage, validate_ops_rules
from smartlink.rules.loader import load_rules, resolve_rules
from smartlink.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestLoadRules:
    def test_load_project_rules_file(self) -> None:
        """The shipped rules.yaml validates."""
        rules = load_rules(PROJECT_ROOT / "rules.yaml")

        assert rules.limits.max_links == 50
        assert rules.storage.profile_key == "smartlink_data"
        assert rules.storage.stats_key == "smartlink_stats"
        assert rules.export.schema_version == "1.0.0"

    def test_load_nonexistent_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_schema_violation_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("limits:\n  max_links: 0\n")

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_load_strips_markdown_code_fences(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.md"
        path.write_text("## rules\n\n```yaml\nlimits:\n  max_links: 5\n```\n\nNotes.\n")

        assert load_rules(path).limits.max_links == 5

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")

        assert load_rules(path) == Rules()


class TestResolveRules:
    def test_missing_file_falls_back_to_defaults(self, tmp_path, monkeypatch) -> None:
        monkeypatch.delenv("SMARTLINK_DATA_DIR", raising=False)

        rules = resolve_rules(tmp_path / "absent.yaml")

        assert rules == Rules()

    def test_env_selects_rules_file(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("storage:\n  backend: memory\n")
        monkeypatch.setenv("SMARTLINK_RULES", str(path))

        assert resolve_rules().storage.backend == "memory"

    def test_env_overrides_data_dir(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("SMARTLINK_DATA_DIR", str(tmp_path / "elsewhere"))

        rules = resolve_rules(tmp_path / "absent.yaml")

        assert rules.storage.data_dir == str(tmp_path / "elsewhere")


class TestOpsValidation:
    def test_same_keys_exit(self) -> None:
        rules = Rules()
        rules.storage.stats_key = rules.storage.profile_key

        with pytest.raises(SystemExit):
            validate_ops_rules(rules)

    def test_creates_data_dir(self, tmp_path: Path) -> None:
        rules = Rules()
        rules.storage.data_dir = str(tmp_path / "data")

        validate_ops_rules(rules)

        assert (tmp_path / "data").is_dir()


class TestCreateStorage:
    def test_backends(self, tmp_path: Path) -> None:
        rules = Rules()
        rules.storage.data_dir = str(tmp_path)

        assert isinstance(create_storage(rules), LocalFileStore)

        rules.storage.backend = "sqlite"
        assert isinstance(create_storage(rules), SQLiteKeyValueStore)
        assert (tmp_path / "smartlink.db").exists()

        rules.storage.backend = "memory"
        assert isinstance(create_storage(rules), InMemoryKeyValueStore)
