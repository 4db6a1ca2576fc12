# Copyright 2025 CrownOps Engineering
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

"""Shared configuration defaults for querygen."""

from __future__ import annotations

from typing import Final

SUPPORTED_VERSION: Final[str] = "1"
DEFAULT_SCHEMA: Final[str] = "public"
POINTER_SIGIL: Final[str] = "*"
COLUMN_SEPARATOR: Final[str] = "."
TYPE_NAME_SEPARATOR: Final[str] = "."
MODULE_PATH_SEPARATOR: Final[str] = "/"

DEFAULT_CONFIG_FILENAME: Final[str] = "querygen.json"
CONFIG_FILENAMES: Final[tuple[str, ...]] = (
    DEFAULT_CONFIG_FILENAME,
    "querygen.toml",
    "sqlc.json",
)

__all__ = [
    "COLUMN_SEPARATOR",
    "CONFIG_FILENAMES",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_SCHEMA",
    "MODULE_PATH_SEPARATOR",
    "POINTER_SIGIL",
    "SUPPORTED_VERSION",
    "TYPE_NAME_SEPARATOR",
]
