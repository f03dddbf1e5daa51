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

"""Tokenizer options loading for dewey.

Options are resolved from three layers, last wins:

1. **Built-in defaults** (TokenizerOptions())
2. **Options file** (optional YAML file with a ``tokenizer:`` section)
3. **Overrides** (a dict passed by the caller, same shape as the file)

Merge Behavior:
    - **Dicts**: Recursively merged (keys from overlay override base)
    - **Scalars**: Overwritten

Options File Format:
    ```yaml
    tokenizer:
      dash_is_separator: true   # treat "-" like "."
      fold_ascii_case: false    # compare "A" and "a" as equal text
    ```

Error Handling:
    - ConfigError: Options file doesn't exist, YAML parse errors, empty
        files, non-mapping sections, unknown keys, non-boolean values
    - All errors are chained with "from err" for better debugging

Example:
    ```python
    from pathlib import Path
    from dewey.config import load_options
    from dewey.versioning import tokenize

    options = load_options(Path("dewey.yaml"))
    tokenize("1.0-RC1", options)
    ```
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from dewey.exceptions import ConfigError
from dewey.logging import get_global_logger

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class TokenizerOptions:
    """Switches that change how strings are split into segments.

    Attributes:
        dash_is_separator: Treat "-" as a DOT separator like ".".
        fold_ascii_case: Lower-case ASCII letters inside TEXT segments so
            that "A" and "a" compare equal. Keywords stay case-sensitive.

    """

    dash_is_separator: bool = True
    fold_ascii_case: bool = False


_SECTION = "tokenizer"

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Raises:
        ConfigError: When file does not exist, invalid YAML (parse error), or empty files.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Validation
# -------------------------------


def _build_options(cfg: dict[str, Any], origin: str) -> TokenizerOptions:
    """Turn a merged config dict into TokenizerOptions.

    Raises:
        ConfigError: On a non-mapping section, unknown keys, or non-boolean values.
    """
    section = cfg.get(_SECTION)
    if not isinstance(section, dict):
        raise ConfigError(f"'{_SECTION}' must be a mapping (dict): {origin}")

    known = {f.name for f in fields(TokenizerOptions)}
    unknown = sorted(str(key) for key in section if key not in known)
    if unknown:
        raise ConfigError(
            f"unknown {_SECTION} option(s) {', '.join(unknown)} in {origin}; "
            f"expected one of: {', '.join(sorted(known))}"
        )

    for key, value in section.items():
        if not isinstance(value, bool):
            raise ConfigError(
                f"{_SECTION}.{key} must be true or false, got {value!r} in {origin}"
            )

    return TokenizerOptions(**section)


# -------------------------------
# Public API
# -------------------------------


def load_options(
    path: Path | None = None,
    *,
    overrides: dict[str, Any] | None = None,
) -> TokenizerOptions:
    """Loads and merges tokenizer options.

    Args:
        path: Optional YAML options file. When None, only the built-in
            defaults and overrides apply.
        overrides: Optional dict shaped like the options file, applied last.

    Returns:
        The effective TokenizerOptions.

    Raises:
        ConfigError: On a missing or empty file, YAML parse errors, invalid
            structure, unknown keys or non-boolean values.

    Example:
        ```python
        options = load_options(overrides={"tokenizer": {"fold_ascii_case": True}})
        options.fold_ascii_case  # True
        ```
    """
    logger = get_global_logger()

    merged: dict[str, Any] = {_SECTION: asdict(TokenizerOptions())}
    origin = "built-in defaults"

    if path is not None:
        logger.verbose("CONFIG", f"Loading options: {path}")
        file_obj = _load_yaml_file(path)
        if not isinstance(file_obj, dict):
            raise ConfigError(f"top-level YAML must be a mapping (dict): {path}")
        if _SECTION not in file_obj:
            logger.warning("CONFIG", f"No '{_SECTION}' section in {path}")
        merged = _deep_merge_dicts(merged, file_obj)
        origin = str(path)

    if overrides:
        merged = _deep_merge_dicts(merged, overrides)
        origin = f"{origin} + overrides"

    options = _build_options(merged, origin)
    logger.verbose("CONFIG", f"Effective options: {options}")
    return options
