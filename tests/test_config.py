"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from smartcommit.config.defaults import DEFAULT_TOML
from smartcommit.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.message.max_length == 50
        assert cfg.message.include_breaking_change is True
        assert cfg.prompt.max_diff_chars == 8000
        assert cfg.generator.command == []
        assert cfg.output.format == "terminal"

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.message.max_length == 50
        assert cfg.generator.timeout == 120
        assert cfg.logging.level == "warning"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text(
            'version = "1.0"\n'
            "[message]\n"
            "max_length = 72\n"
            "include_breaking_change = false\n"
            "[generator]\n"
            'command = ["llm", "-m", "mini"]\n'
            "[rules]\n"
            'disable = ["MODIFY_API"]\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.message.max_length == 72
        assert cfg.message.include_breaking_change is False
        assert cfg.generator.command == ["llm", "-m", "mini"]
        assert cfg.rules.disable == ["MODIFY_API"]

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text("[message]\nemoji = true\n")
        assert load_config(tmp_path).message.max_length == 50

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[output]\nformat = "json"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.output.format == "json"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestValidation:
    @pytest.mark.parametrize(
        "body",
        [
            "[message]\nmax_length = 0\n",
            "[prompt]\nmax_diff_chars = -1\n",
            '[output]\nformat = "sarif"\n',
            '[generator]\ncommand = "llm -m mini"\n',
            'message = "not a table"\n',
        ],
    )
    def test_rejected(self, tmp_path: Path, body: str):
        (tmp_path / ".smartcommit.toml").write_text(body)
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_max_length_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_MAX_LENGTH", "65")
        assert load_config(tmp_path).message.max_length == 65

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_generator_override_is_split(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_GENERATOR", "llm -m 'gpt 4o'")
        assert load_config(tmp_path).generator.command == ["llm", "-m", "gpt 4o"]

    def test_disable_rules_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_DISABLE_RULES", "REMOVE_FUNCTION, MODIFY_API")
        cfg = load_config(tmp_path)
        assert cfg.rules.disable == ["REMOVE_FUNCTION", "MODIFY_API"]

    def test_log_level_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_LOG_LEVEL", "DEBUG")
        assert load_config(tmp_path).logging.level == "debug"

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("SMARTCOMMIT_MAX_LENGTH", "lots")
        monkeypatch.setenv("SMARTCOMMIT_FORMAT", "xml")
        cfg = load_config(tmp_path)
        assert cfg.message.max_length == 50
        assert cfg.output.format == "terminal"


class TestLoggingSection:
    def test_json_off_by_default(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text(DEFAULT_TOML)
        assert load_config(tmp_path).logging.json is False

    def test_json_enabled(self, tmp_path: Path):
        (tmp_path / ".smartcommit.toml").write_text('[logging]\nlevel = "info"\njson = true\n')
        cfg = load_config(tmp_path)
        assert cfg.logging.json is True
        assert cfg.logging.level == "info"
