"""Tests for configuration loading, merging and validation."""

from pathlib import Path

import pytest

from regcheck.cli.config import (
    DEFAULT_CONFIG,
    ConfigError,
    load_config,
    merge_config,
    validate_config,
)


class TestLoadConfig:
    """Tests for load_config."""

    def test_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text('{"delimiter": ",", "strict": true}')

        assert load_config(path) == {"delimiter": ",", "strict": True}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path: Path, suffix):
        path = tmp_path / f"config{suffix}"
        path.write_text("encoding: latin-1\noutput: json\n")

        assert load_config(path) == {"encoding": "latin-1", "output": "json"}

    def test_unknown_extension_falls_back_to_yaml(self, tmp_path: Path):
        path = tmp_path / "regcheck.conf"
        path.write_text("strict: false\n")

        assert load_config(path) == {"strict": False}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert load_config(path) == {}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "config.yaml"
        path.write_text("strict: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_config(path)


class TestMergeConfig:
    """Tests for merge_config."""

    def test_defaults(self):
        assert merge_config({}) == DEFAULT_CONFIG

    def test_file_values_override_defaults(self):
        assert merge_config({"delimiter": ","})["delimiter"] == ","

    def test_cli_overrides_file(self):
        merged = merge_config({"strict": True}, strict=False)
        assert merged["strict"] is False

    def test_none_overrides_are_ignored(self):
        merged = merge_config({"encoding": "latin-1"}, encoding=None)
        assert merged["encoding"] == "latin-1"

    def test_base_not_mutated(self):
        base = {"delimiter": ","}
        merge_config(base, delimiter="|")
        assert base == {"delimiter": ","}


class TestValidateConfig:
    """Tests for validate_config."""

    def test_defaults_are_valid(self):
        assert validate_config(DEFAULT_CONFIG) == []

    def test_collects_all_errors(self):
        errors = validate_config(
            {"colour": "red", "output": "xml", "skip_header": "yes", "delimiter": 5}
        )

        assert len(errors) == 4
        assert "Unknown configuration key: 'colour'" in errors

    def test_unknown_encoding(self):
        assert validate_config({"encoding": "klingon"}) == ["Unknown encoding: 'klingon'"]
