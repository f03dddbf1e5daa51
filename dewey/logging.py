# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Logging interface for dewey.

This module provides a configurable logging interface that the tokenizer,
comparator and config loader use for output without depending on any
particular front end. The logger can be configured globally or passed as a
parameter for better isolation.

The logger supports three output levels:
- Warning: Always printed (for recoverable configuration problems)
- Verbose: Only printed when verbose mode is enabled
- Debug: Only printed when debug mode is enabled (implies verbose)

Example:
    Configure global logger:
        ```python
        from dewey.logging import get_logger, set_global_logger

        logger = get_logger(verbose=True, debug=False)
        set_global_logger(logger)
        ```

    Use in library code:
        ```python
        from dewey.logging import get_global_logger

        logger = get_global_logger()
        logger.verbose("CONFIG", "Loaded options from dewey.yaml")
        logger.debug("COMPARE", "index 2: ALPHA < BETA")
        ```

    Use with dependency injection:

        def my_function(logger=None):
            if logger is None:
                logger = get_global_logger()
            logger.verbose("MODULE", "Processing...")

Note:
    The default global logger is silent, so comparing versions prints
    nothing unless a logger is explicitly configured.
"""

from __future__ import annotations

import sys
from typing import Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning message.

        Args:
            prefix: Message prefix (e.g., "CONFIG").
            message: Log message.
        """
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message.

        Args:
            prefix: Message prefix (e.g., "CONFIG", "TOKENIZE").
            message: Log message.
        """
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message.

        Args:
            prefix: Message prefix (e.g., "COMPARE").
            message: Log message.
        """
        ...


class DefaultLogger:
    """Default logger implementation that prints to stdout.

    Warnings go to stderr. Verbose and debug output respect the flags
    given at construction.
    """

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning message to stderr."""
        print(f"[{prefix}] WARNING: {message}", file=sys.stderr)

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose log message (only when verbose mode is active)."""
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug log message (only when debug mode is active)."""
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output.

    Useful for programmatic usage when output is not desired.
    """

    def warning(self, prefix: str, message: str) -> None:
        """Suppress warning output."""
        pass

    def verbose(self, prefix: str, message: str) -> None:
        """Suppress verbose output."""
        pass

    def debug(self, prefix: str, message: str) -> None:
        """Suppress debug output."""
        pass


# Global logger instance (defaults to silent)
_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Get a logger instance with specified verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A logger instance configured with the specified verbosity.

    Example:
        Trace every comparison decision:
            ```python
            logger = get_logger(debug=True)
            compare_versions("1.0rc1", "1.0", logger=logger)
            ```
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Get the global logger instance.

    Returns:
        The current global logger instance.

    Note:
        The default global logger is silent. Use set_global_logger() to
        configure it, or pass a logger instance directly to functions.
    """
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use as the global logger.

    Note:
        This affects all library functions that fall back to
        get_global_logger() when no logger is passed. For better
        isolation, pass logger instances directly to functions instead.
    """
    global _global_logger
    _global_logger = logger
