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

"""Model types and enumerations for querygen.

Enumerations here are plain string enums so they serialise to their document
spelling without extra conversion. ``from_str`` helpers are provided where a
value arrives from the command line or environment and is normalised first;
document values (such as ``Engine``) are matched exactly by the pydantic
models instead.
"""

from __future__ import annotations

from querygen.compat import StrEnum


class Engine(StrEnum):
    """SQL dialect a package's schema and queries are written against.

    Attributes:
        POSTGRESQL: PostgreSQL, the default when a package names no engine.
        MYSQL: MySQL.
    """

    POSTGRESQL = "postgresql"
    MYSQL = "mysql"


class ConfigFormat(StrEnum):
    """Serialisation formats accepted by the configuration loader.

    Attributes:
        JSON: JSON document (the canonical format).
        TOML: TOML document with the same field layout.
    """

    JSON = "json"
    TOML = "toml"

    @classmethod
    def from_str(cls, raw: str) -> ConfigFormat:
        """Create a ConfigFormat enum from a string value.

        Args:
            raw: String representation of the format.

        Returns:
            ConfigFormat enum value.

        Raises:
            ValueError: If the string does not match any ConfigFormat value.
        """
        value = raw.strip().lower().lstrip(".")
        try:
            return cls(value)
        except ValueError as exc:
            message = f"Unknown config format: {raw}"
            raise ValueError(message) from exc


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            message = f"Unknown log format: {raw}"
            raise ValueError(message) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable components.

    Attributes:
        CONFIG: Configuration loading and validation.
        CLI: Command-line interface.
    """

    CONFIG = "config"
    CLI = "cli"


__all__ = ["ConfigFormat", "Engine", "LogComponent", "LogFormat"]
