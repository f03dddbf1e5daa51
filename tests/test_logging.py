"""
Tests for dewey.logging module.

Tests the logger interface including:
- Verbosity levels of DefaultLogger
- SilentLogger
- Global logger configuration
- Debug output from the tokenizer and comparator
"""

from __future__ import annotations

from dewey.logging import (
    DefaultLogger,
    SilentLogger,
    get_global_logger,
    get_logger,
    set_global_logger,
)
from dewey.versioning import compare_versions, is_newer


class TestDefaultLogger:
    """Tests for DefaultLogger verbosity handling."""

    def test_quiet_by_default(self, capsys):
        """Test that verbose and debug are off unless requested."""
        logger = get_logger()
        logger.verbose("TEST", "hidden")
        logger.debug("TEST", "hidden")
        assert capsys.readouterr().out == ""

    def test_verbose(self, capsys):
        """Test that verbose mode prints verbose but not debug."""
        logger = get_logger(verbose=True)
        logger.verbose("TEST", "shown")
        logger.debug("TEST", "hidden")
        assert capsys.readouterr().out == "[TEST] shown\n"

    def test_debug_implies_verbose(self, capsys):
        """Test that debug mode prints both levels."""
        logger = DefaultLogger(debug=True)
        logger.verbose("TEST", "one")
        logger.debug("TEST", "two")
        assert capsys.readouterr().out == "[TEST] one\n[TEST] two\n"

    def test_warning_to_stderr(self, capsys):
        """Test that warnings always print, on stderr."""
        DefaultLogger().warning("TEST", "careful")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "[TEST] WARNING: careful\n"


class TestSilentLogger:
    """Tests for SilentLogger."""

    def test_prints_nothing(self, capsys, silent_logger):
        logger = silent_logger
        assert isinstance(logger, SilentLogger)
        compare_versions("1.0rc1", "1.0", logger=logger)
        logger.warning("TEST", "x")
        logger.verbose("TEST", "x")
        logger.debug("TEST", "x")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestGlobalLogger:
    """Tests for global logger configuration."""

    def test_default_is_silent(self, capsys):
        """Test that comparisons print nothing without configuration."""
        compare_versions("1.0rc1", "1.0")
        assert capsys.readouterr().out == ""

    def test_set_global_logger(self):
        logger = DefaultLogger(verbose=True)
        set_global_logger(logger)
        assert get_global_logger() is logger


class TestComparisonOutput:
    """Tests for debug and verbose output of comparisons."""

    def test_compare_debug_names_deciding_index(self, capsys):
        """Test that the deciding position is logged."""
        compare_versions("1.0rc1", "1.0", logger=DefaultLogger(debug=True))
        out = capsys.readouterr().out
        assert "[TOKENIZE] '1.0rc1' -> 4 segment(s)" in out
        assert "[COMPARE] index 3:" in out
        assert "-> LESS" in out

    def test_compare_debug_skips_separator(self, capsys):
        """Test that the logged leftover kind is the suffix after a dash."""
        compare_versions("1.0-rc1", "1.0", logger=DefaultLogger(debug=True))
        assert "RC follows in '1.0-rc1' -> LESS" in capsys.readouterr().out

    def test_compare_debug_incomparable(self, capsys):
        """Test that conflicting schemes are logged."""
        compare_versions("1c", "1.0", logger=DefaultLogger(debug=True))
        assert "TEXT against DOT -> INCOMPARABLE" in capsys.readouterr().out

    def test_global_logger_used(self, capsys):
        """Test that the global logger is the fallback."""
        set_global_logger(DefaultLogger(debug=True))
        compare_versions("1.0", "1.00")
        assert "are equal" in capsys.readouterr().out

    def test_is_newer_verbose(self, capsys):
        """Test verbose messages from is_newer."""
        logger = DefaultLogger(verbose=True)
        is_newer("2.0", "1.0", logger=logger)
        is_newer("7.3ce.1", "7.3.2", logger=logger)
        is_newer("1.0", None, logger=logger)
        out = capsys.readouterr().out
        assert "Remote '2.0' is newer than '1.0'" in out
        assert "use different schemes" in out
        assert "No current version" in out
        assert "[TOKENIZE]" not in out
