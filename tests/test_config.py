"""
Tests for dewey.config.loader module.

Tests options loading and merging including:
- Built-in defaults
- YAML file loading
- Override layering
- Error handling
"""

from __future__ import annotations

import pytest

from dewey.config import TokenizerOptions, load_options
from dewey.exceptions import ConfigError, DeweyError
from dewey.logging import DefaultLogger, set_global_logger


class TestOptionsLoading:
    """Tests for basic options loading."""

    def test_defaults(self):
        """Test that no file and no overrides gives the defaults."""
        options = load_options()
        assert options == TokenizerOptions()
        assert options.dash_is_separator is True
        assert options.fold_ascii_case is False

    def test_load_from_file(self, create_yaml_file):
        """Test loading options from a YAML file."""
        path = create_yaml_file(
            "dewey.yaml", {"tokenizer": {"fold_ascii_case": True}}
        )

        options = load_options(path)

        assert options.fold_ascii_case is True
        assert options.dash_is_separator is True

    def test_other_sections_ignored(self, create_yaml_file):
        """Test that unrelated top-level keys are left alone."""
        path = create_yaml_file(
            "dewey.yaml",
            {"resolver": {"strict": True}, "tokenizer": {"dash_is_separator": False}},
        )

        assert load_options(path).dash_is_separator is False

    def test_options_frozen(self):
        """Test that TokenizerOptions is immutable."""
        options = load_options()
        with pytest.raises(AttributeError):
            options.fold_ascii_case = True  # type: ignore


class TestOptionsMerging:
    """Tests for layering behavior."""

    def test_overrides_without_file(self):
        """Test that overrides apply on top of defaults."""
        options = load_options(overrides={"tokenizer": {"fold_ascii_case": True}})
        assert options == TokenizerOptions(fold_ascii_case=True)

    def test_overrides_beat_file(self, create_yaml_file):
        """Test that overrides win over file values, key by key."""
        path = create_yaml_file(
            "dewey.yaml",
            {"tokenizer": {"fold_ascii_case": True, "dash_is_separator": False}},
        )

        options = load_options(
            path, overrides={"tokenizer": {"dash_is_separator": True}}
        )

        assert options.fold_ascii_case is True
        assert options.dash_is_separator is True


class TestOptionsErrors:
    """Tests for configuration error handling."""

    def test_missing_file_raises(self, tmp_test_dir):
        """Test that a missing options file raises ConfigError."""
        with pytest.raises(ConfigError, match="file not found"):
            load_options(tmp_test_dir / "nonexistent.yaml")

    def test_invalid_yaml_raises(self, tmp_test_dir):
        """Test that malformed YAML raises ConfigError."""
        path = tmp_test_dir / "bad.yaml"
        path.write_text("tokenizer: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Error parsing YAML"):
            load_options(path)

    def test_empty_file_raises(self, tmp_test_dir):
        """Test that an empty file raises ConfigError."""
        path = tmp_test_dir / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(ConfigError, match="empty"):
            load_options(path)

    def test_non_mapping_raises(self, tmp_test_dir):
        """Test that a top-level list raises ConfigError."""
        path = tmp_test_dir / "list.yaml"
        path.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_options(path)

    def test_null_section_raises(self, tmp_test_dir):
        """Test that 'tokenizer:' with no value raises ConfigError."""
        path = tmp_test_dir / "null.yaml"
        path.write_text("tokenizer:\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be a mapping"):
            load_options(path)

    def test_unknown_key_raises(self, create_yaml_file):
        """Test that unknown option names raise ConfigError."""
        path = create_yaml_file("dewey.yaml", {"tokenizer": {"collation": "de_DE"}})

        with pytest.raises(ConfigError, match="unknown tokenizer option"):
            load_options(path)

    def test_non_string_key_raises(self, tmp_test_dir):
        """Test that a non-string option name raises ConfigError."""
        path = tmp_test_dir / "keys.yaml"
        path.write_text("tokenizer:\n  1: true\n  x: false\n", encoding="utf-8")

        with pytest.raises(ConfigError, match=r"unknown tokenizer option\(s\) 1, x"):
            load_options(path)

    def test_non_bool_raises(self):
        """Test that non-boolean values raise ConfigError."""
        with pytest.raises(ConfigError, match="must be true or false"):
            load_options(overrides={"tokenizer": {"fold_ascii_case": 1}})

    def test_config_error_is_dewey_error(self, tmp_test_dir):
        """Test that ConfigError can be caught as DeweyError."""
        with pytest.raises(DeweyError):
            load_options(tmp_test_dir / "nonexistent.yaml")

    def test_missing_section_warns(self, create_yaml_file, capsys):
        """Test that a file without a tokenizer section warns and uses defaults."""
        set_global_logger(DefaultLogger())
        path = create_yaml_file("dewey.yaml", {"resolver": {"strict": True}})

        options = load_options(path)

        assert options == TokenizerOptions()
        assert "No 'tokenizer' section" in capsys.readouterr().err
