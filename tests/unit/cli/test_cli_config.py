#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for md2nexus CLI configuration management.

This module tests config file discovery, loading each supported format,
priority handling, and building options from the loaded tables.
"""
import argparse
import json
import logging

import pytest
import yaml

from md2nexus.cli import main
from md2nexus.cli.config import (
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    options_from_config,
    section_values,
)
from md2nexus.exceptions import ValidationError
from md2nexus.options import MarkdownParserOptions, MdastJsonParserOptions, NexusRendererOptions


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_nothing_found(self, tmp_path):
        assert find_config_in_parents(tmp_path) is None
        assert discover_config_file(tmp_path) is None

    def test_dedicated_file_in_start_dir(self, tmp_path):
        config_file = tmp_path / ".md2nexus.toml"
        config_file.write_text("[nexus]\nheading_size = 4\n", encoding="utf-8")

        assert find_config_in_parents(tmp_path) == config_file.resolve()

    def test_found_in_parent(self, tmp_path):
        config_file = tmp_path / ".md2nexus.yaml"
        config_file.write_text("nexus:\n  heading_size: 4\n", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_file.resolve()

    def test_toml_preferred_over_json(self, tmp_path):
        (tmp_path / ".md2nexus.json").write_text("{}", encoding="utf-8")
        (tmp_path / ".md2nexus.toml").write_text("", encoding="utf-8")

        assert find_config_in_parents(tmp_path).name == ".md2nexus.toml"

    def test_pyproject_with_section(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.md2nexus.nexus]\nheading_size = 3\n', encoding="utf-8")

        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

        assert find_config_in_parents(tmp_path) is None

    def test_broken_pyproject_is_skipped(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")

        assert find_config_in_parents(tmp_path) is None

    def test_home_directory_fallback(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        home.mkdir()
        work = tmp_path / "work"
        work.mkdir()
        config_file = home / ".md2nexus.json"
        config_file.write_text('{"nexus": {"heading_size": 2}}', encoding="utf-8")
        monkeypatch.setenv("HOME", str(home))
        monkeypatch.setenv("USERPROFILE", str(home))

        assert discover_config_file(work) == config_file


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading each configuration format."""

    def test_toml(self, tmp_path):
        config_file = tmp_path / "conf.toml"
        config_file.write_text('[nexus]\nmonospace_font = "Consolas"\n', encoding="utf-8")

        assert load_config_file(config_file) == {"nexus": {"monospace_font": "Consolas"}}

    def test_yaml(self, tmp_path):
        config_file = tmp_path / "conf.yml"
        config_file.write_text(yaml.safe_dump({"markdown": {"parse_math": False}}), encoding="utf-8")

        assert load_config_file(str(config_file)) == {"markdown": {"parse_math": False}}

    def test_empty_yaml(self, tmp_path):
        config_file = tmp_path / "conf.yaml"
        config_file.write_text("", encoding="utf-8")

        assert load_config_file(config_file) == {}

    def test_json(self, tmp_path):
        config_file = tmp_path / "conf.json"
        config_file.write_text(json.dumps({"mdast": {"strict_mode": False}}), encoding="utf-8")

        assert load_config_file(config_file) == {"mdast": {"strict_mode": False}}

    def test_pyproject_section(self, tmp_path):
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.md2nexus.nexus]\nheading_size = 6\n", encoding="utf-8")

        assert load_config_file(pyproject) == {"nexus": {"heading_size": 6}}

    @pytest.mark.parametrize(
        "name,content",
        [
            ("conf.toml", "[nexus\n"),
            ("conf.json", "{not json"),
            ("conf.json", "[1, 2]"),
            ("conf.yaml", "nexus: [unclosed"),
            ("conf.yaml", "- a\n- b\n"),
            ("conf.ini", "[nexus]"),
        ],
    )
    def test_invalid_files(self, tmp_path, name, content):
        config_file = tmp_path / name
        config_file.write_text(content, encoding="utf-8")

        with pytest.raises(argparse.ArgumentTypeError):
            load_config_file(config_file)

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test which config source wins."""

    @pytest.fixture
    def configs(self, tmp_path):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"nexus": {"heading_size": 1}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"nexus": {"heading_size": 2}}', encoding="utf-8")
        (tmp_path / ".md2nexus.json").write_text('{"nexus": {"heading_size": 3}}', encoding="utf-8")
        return explicit, env

    def test_explicit_wins(self, configs, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        explicit, env = configs

        assert load_config_with_priority(str(explicit), str(env))["nexus"]["heading_size"] == 1

    def test_env_var_before_discovery(self, configs, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        _, env = configs

        assert load_config_with_priority(None, str(env))["nexus"]["heading_size"] == 2

    def test_discovery_last(self, configs, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config_with_priority()["nexus"]["heading_size"] == 3

    def test_no_config_anywhere(self):
        assert load_config_with_priority() == {}


@pytest.mark.unit
@pytest.mark.cli
class TestOptionsFromConfig:
    """Test turning config tables into options objects."""

    def test_defaults(self):
        markdown, mdast, nexus = options_from_config({})

        assert markdown == MarkdownParserOptions()
        assert mdast == MdastJsonParserOptions()
        assert nexus == NexusRendererOptions()

    def test_values_applied(self):
        config = {
            "markdown": {"parse_math": False},
            "mdast": {"strict_mode": False},
            "nexus": {"heading_size": 4, "monospace_font": "Consolas"},
        }

        markdown, mdast, nexus = options_from_config(config)

        assert markdown.parse_math is False
        assert mdast.strict_mode is False
        assert nexus.heading_size == 4
        assert nexus.monospace_font == "Consolas"

    def test_overrides_beat_file(self):
        _, _, nexus = options_from_config({"nexus": {"heading_size": 4}}, nexus={"heading_size": 6})
        assert nexus.heading_size == 6

    def test_unknown_keys_are_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            _, _, nexus = options_from_config({"nexus": {"heading_size": 2, "colour": "red"}, "pdf": {}})

        assert nexus.heading_size == 2
        assert "colour" in caplog.text
        assert "pdf" in caplog.text

    def test_out_of_range_value(self):
        with pytest.raises(ValidationError) as exc_info:
            options_from_config({"nexus": {"heading_size": 99}})
        assert exc_info.value.parameter_name == "nexus"

    def test_section_must_be_a_table(self):
        with pytest.raises(argparse.ArgumentTypeError):
            section_values({"nexus": 3}, "nexus")


@pytest.mark.unit
@pytest.mark.cli
class TestConfigThroughMain:
    """Test config handling end to end through ``main()``."""

    @pytest.fixture
    def stdin_heading(self, monkeypatch):
        import io

        monkeypatch.setattr("sys.stdin", io.StringIO("# T"))

    def test_discovered_config_is_used(self, stdin_heading, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".md2nexus.toml").write_text("[nexus]\nheading_size = 2\n", encoding="utf-8")

        assert main([]) == 0
        assert capsys.readouterr().out == "[size=2]T[/size]\n"

    def test_flag_overrides_config(self, stdin_heading, tmp_path, capsys):
        config_file = tmp_path / "conf.toml"
        config_file.write_text("[nexus]\nheading_size = 2\n", encoding="utf-8")

        assert main(["--config", str(config_file), "--heading-size", "4"]) == 0
        assert capsys.readouterr().out == "[size=4]T[/size]\n"

    def test_env_var_config(self, stdin_heading, tmp_path, monkeypatch, capsys):
        config_file = tmp_path / "conf.json"
        config_file.write_text('{"nexus": {"heading_size": 1}}', encoding="utf-8")
        monkeypatch.setenv("MD2NEXUS_CONFIG", str(config_file))

        assert main([]) == 0
        assert capsys.readouterr().out == "[size=1]T[/size]\n"

    def test_no_config_ignores_everything(self, stdin_heading, tmp_path, monkeypatch, capsys):
        config_file = tmp_path / "conf.json"
        config_file.write_text('{"nexus": {"heading_size": 1}}', encoding="utf-8")
        monkeypatch.setenv("MD2NEXUS_CONFIG", str(config_file))

        assert main(["--no-config", "--config", str(config_file)]) == 0
        assert capsys.readouterr().out == "[size=5]T[/size]\n"

    def test_missing_config_file(self, stdin_heading, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.toml")]) == 3
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_config_value(self, stdin_heading, tmp_path, capsys):
        config_file = tmp_path / "conf.toml"
        config_file.write_text("[nexus]\nheading_size = 0\n", encoding="utf-8")

        assert main(["--config", str(config_file)]) == 3
        assert "heading_size" in capsys.readouterr().err
