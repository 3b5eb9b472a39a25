"""Tests for .argus.yaml loading and path resolution."""

import shutil
from pathlib import Path

import pytest
import yaml

from argus_engine.config import (
    CONFIG_TEMPLATE,
    DEFAULT_IGNORE,
    ArgusConfig,
    config_exists,
    load_config,
    save_config,
)
from argus_engine.paths import config_path, output_path, project_dir_for, project_root

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path):
        cfg = load_config(tmp_path)
        assert cfg == ArgusConfig()
        assert cfg.output == ["claude"]
        assert cfg.ignore == DEFAULT_IGNORE
        assert cfg.merge is True
        assert cfg.add_custom is False

    def test_loads_fixture(self, tmp_path):
        shutil.copy(FIXTURES / "argus-config.yaml", tmp_path / ".argus.yaml")
        cfg = load_config(tmp_path)
        assert cfg.output == ["claude", "cursor"]
        assert cfg.ignore == ["node_modules"]
        assert cfg.custom_conventions == ["Prefer pathlib over os.path"]
        assert cfg.overrides == {"project_name": "Demo"}
        assert cfg.add_custom is True

    def test_all_expands_to_every_format(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("output: [all]\n")
        assert load_config(tmp_path).output == ["claude", "cursor", "copilot"]

    def test_duplicates_collapse(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("output: [claude, all, claude]\n")
        assert load_config(tmp_path).output == ["claude", "cursor", "copilot"]

    def test_empty_output_falls_back(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("output: []\nmerge: false\n")
        cfg = load_config(tmp_path)
        assert cfg.output == ["claude"]
        assert cfg.merge is False

    def test_empty_file_is_default(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("")
        assert load_config(tmp_path) == ArgusConfig()

    def test_unknown_format_rejected(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("output: [emacs]\n")
        with pytest.raises(ValueError, match="Unknown output format"):
            load_config(tmp_path)

    def test_non_mapping_rejected(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="not a YAML mapping"):
            load_config(tmp_path)

    def test_malformed_yaml_propagates(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("output: [claude\n")
        with pytest.raises(yaml.YAMLError):
            load_config(tmp_path)

    def test_template_parses(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text(CONFIG_TEMPLATE)
        cfg = load_config(tmp_path)
        assert cfg.output == ["claude"]
        assert cfg.custom_conventions == []
        assert cfg.merge is True
        assert cfg.add_custom is False

    def test_uses_project_dir_env(self, tmp_path, monkeypatch):
        (tmp_path / ".argus.yaml").write_text("add_custom: true\n")
        monkeypatch.setenv("ARGUS_PROJECT_DIR", str(tmp_path))
        assert load_config().add_custom is True


class TestSaveConfig:
    def test_round_trip(self, tmp_path):
        cfg = ArgusConfig(output=["copilot"], overrides={"framework": "Flask"}, add_custom=True)
        path = save_config(cfg, tmp_path)
        assert path == tmp_path / ".argus.yaml"
        assert path.read_text().startswith("# Argus Configuration")
        assert load_config(tmp_path) == cfg

    def test_config_exists(self, tmp_path):
        assert not config_exists(tmp_path)
        save_config(ArgusConfig(), tmp_path)
        assert config_exists(tmp_path)


class TestPaths:
    def test_project_root_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ARGUS_PROJECT_DIR", str(tmp_path))
        assert project_root() == tmp_path
        assert config_path() == tmp_path / ".argus.yaml"

    def test_project_root_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ARGUS_PROJECT_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        assert project_root() == Path.cwd()

    def test_output_paths(self, tmp_path):
        assert output_path(tmp_path, "claude") == tmp_path / "CLAUDE.md"
        assert output_path(tmp_path, "copilot") == tmp_path / ".github" / "copilot-instructions.md"


class TestFieldShapes:
    def test_scalar_ignore_becomes_list(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("ignore: node_modules\n")
        assert load_config(tmp_path).ignore == ["node_modules"]

    def test_scalar_convention_becomes_list(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("custom_conventions: Use pathlib\n")
        assert load_config(tmp_path).custom_conventions == ["Use pathlib"]

    def test_explicit_empty_ignore(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("ignore: []\n")
        assert load_config(tmp_path).ignore == []

    def test_mapping_ignore_rejected(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("ignore:\n  dist: true\n")
        with pytest.raises(ValueError, match="'ignore' must be a list"):
            load_config(tmp_path)

    def test_list_overrides_rejected(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("overrides:\n  - project_name\n")
        with pytest.raises(ValueError, match="'overrides' must be a mapping"):
            load_config(tmp_path)

    def test_non_string_values_coerced(self, tmp_path):
        (tmp_path / ".argus.yaml").write_text("overrides:\n  version: 2\n")
        assert load_config(tmp_path).overrides == {"version": "2"}


class TestProjectDirFor:
    def test_defaults_to_target_dir(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ARGUS_PROJECT_DIR", raising=False)
        assert project_dir_for(tmp_path / "CLAUDE.md") == tmp_path

    def test_env_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("ARGUS_PROJECT_DIR", str(tmp_path / "root"))
        assert project_dir_for(tmp_path / "docs" / "CLAUDE.md") == tmp_path / "root"
