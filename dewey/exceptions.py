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

"""Exception hierarchy for dewey.

Parsing and comparing versions never raises: every string tokenizes, and
two versions that share no common scheme compare as
``Ordering.INCOMPARABLE`` rather than failing. Exceptions are reserved for
the layer around the core:

- ConfigError: Configuration-related errors (YAML parse, missing file,
  unknown keys, invalid values)

All exceptions inherit from DeweyError, allowing users to catch all dewey
errors with a single except clause if needed.

Example:
    Catching configuration errors:
        ```python
        from pathlib import Path
        from dewey.config import load_options
        from dewey.exceptions import ConfigError

        try:
            options = load_options(Path("dewey.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```

    Catching all dewey errors:
        ```python
        from dewey.exceptions import DeweyError

        try:
            options = load_options(Path("dewey.yaml"))
        except DeweyError as e:
            print(f"dewey error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "DeweyError",
    "ConfigError",
]


class DeweyError(Exception):
    """Base exception for all dewey errors.

    All dewey-specific exceptions inherit from this class, allowing users
    to catch all dewey errors with a single except clause if needed.
    """

    pass


class ConfigError(DeweyError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Missing or empty options files
    - Unknown option keys
    - Option values of the wrong type

    Example:
        Catching configuration errors:
            ```python
            from dewey.exceptions import ConfigError

            try:
                options = load_options(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
