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

"""Configuration loading for dewey.

Tokenizer options come from built-in defaults, an optional YAML options
file and caller overrides, merged in that order (last wins).

Public API:

- TokenizerOptions: Frozen dataclass of tokenizer switches
- load_options: Load and merge options from YAML and overrides

Example:
    Basic usage:

        from pathlib import Path
        from dewey.config import load_options

        options = load_options(Path("dewey.yaml"))
        print(options.dash_is_separator)  # True

"""

from .loader import TokenizerOptions, load_options

__all__ = ["TokenizerOptions", "load_options"]
