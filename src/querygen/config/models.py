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

"""Configuration models and errors for querygen.

This module defines two layers of models. Pydantic models describe the raw
document exactly as it is written (unknown fields are rejected), and frozen
dataclasses describe the validated, normalised settings that code generators
consume. The conversion between the two lives in
:mod:`querygen.config.validation` and :mod:`querygen.config.overrides`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from textwrap import dedent
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Final, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from querygen._internal.exceptions import QuerygenValidationError
from querygen.config.constants import (
    COLUMN_SEPARATOR,
    DEFAULT_CONFIG_FILENAME,
    SUPPORTED_VERSION,
    TYPE_NAME_SEPARATOR,
)
from querygen.core.model_types import Engine

if TYPE_CHECKING:
    from pathlib import Path

NO_VERSION_HINT: Final[str] = dedent(
    f"""\
    The configuration file must have a version number.
    Set the version to {SUPPORTED_VERSION} at the top of {DEFAULT_CONFIG_FILENAME}:

    {{
      "version": "{SUPPORTED_VERSION}"
      ...
    }}
    """,
)
UNKNOWN_VERSION_HINT: Final[str] = dedent(
    f"""\
    The configuration file has an invalid version number.
    The only supported version is "{SUPPORTED_VERSION}".
    """,
)
NO_PACKAGES_HINT: Final[str] = "No packages are configured"


class ConfigValidationError(QuerygenValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigNotFoundError(ConfigValidationError):
    """Raised when no configuration file can be located."""

    def __init__(self, candidates: tuple[Path, ...]) -> None:
        """Initialize the exception with the paths that were searched.

        Args:
            candidates: Every path checked, in search order.
        """
        self.candidates = candidates
        searched = ", ".join(str(path) for path in candidates)
        super().__init__(f"No configuration file found (searched: {searched})")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class ConfigDecodeError(ConfigValidationError):
    """Raised when a document is malformed or carries unrecognised fields."""

    def __init__(self, source: str, error: Exception) -> None:
        """Initialize the exception with the document source and decoder error.

        Args:
            source: Human-readable name of the document (a path or ``<stream>``).
            error: The underlying decoding or schema validation error.
        """
        self.source = source
        self.error = error
        super().__init__(f"Invalid querygen configuration in {source}: {error}")


class MissingVersionError(ConfigValidationError):
    """Raised when the document has no version number."""

    hint = NO_VERSION_HINT

    def __init__(self) -> None:
        """Initialize the exception with the fixed message."""
        super().__init__("no version number")


class UnknownVersionError(ConfigValidationError):
    """Raised when the document declares an unsupported version."""

    hint = UNKNOWN_VERSION_HINT

    def __init__(self, provided: str) -> None:
        """Initialize the exception with the version found in the document.

        Args:
            provided: The version string from the document.
        """
        self.provided = provided
        self.expected = SUPPORTED_VERSION
        super().__init__(f"invalid version number {provided!r}")


class NoPackagesError(ConfigValidationError):
    """Raised when the document configures no packages."""

    hint = NO_PACKAGES_HINT

    def __init__(self) -> None:
        """Initialize the exception with the fixed message."""
        super().__init__("no packages")


class NoPackagePathError(ConfigValidationError):
    """Raised when a package entry has no path."""

    def __init__(self, index: int) -> None:
        """Initialize the exception with the position of the package.

        Args:
            index: Zero-based position of the package in the document.
        """
        self.index = index
        super().__init__(f"missing package path (packages[{index}])")


class NoPackageNameError(ConfigValidationError):
    """Raised when a package still has no name when the index is built."""

    def __init__(self, path: str) -> None:
        """Initialize the exception with the path the name was derived from.

        Args:
            path: The package path whose basename was empty.
        """
        self.path = path
        super().__init__(f"missing package name (path {path!r})")


class OverrideError(ConfigValidationError):
    """Base class for invalid ``overrides`` entries."""


class OverrideConflictError(OverrideError):
    """Raised when an override sets both ``column`` and ``postgres_type``."""

    def __init__(self, column: str, postgres_type: str) -> None:
        """Initialize the exception with both conflicting values.

        Args:
            column: The ``column`` value of the override.
            postgres_type: The ``postgres_type`` value of the override.
        """
        self.column = column
        self.postgres_type = postgres_type
        super().__init__(
            f"Override specifying both `column` ({column!r}) and `postgres_type` ({postgres_type!r}) is not valid.",
        )


class OverrideTargetMissingError(OverrideError):
    """Raised when an override sets neither ``column`` nor ``postgres_type``."""

    def __init__(self) -> None:
        """Initialize the exception with the fixed message."""
        super().__init__("Override must specify one of either `column` or `postgres_type`")


class InvalidColumnReferenceError(OverrideError):
    """Raised when an override ``column`` has the wrong number of segments."""

    def __init__(self, column: str) -> None:
        """Initialize the exception with the malformed column reference.

        Args:
            column: The ``column`` value of the override.
        """
        self.column = column
        super().__init__(
            f"Override `column` specifier {column!r} is not the proper format, "
            "expected '[catalog.][schema.]relation.column'",
        )


class InvalidTypeReferenceError(OverrideError):
    """Raised when an override ``go_type`` is not module-path qualified."""

    def __init__(self, go_type: str) -> None:
        """Initialize the exception with the malformed type reference.

        Args:
            go_type: The ``go_type`` value of the override.
        """
        self.go_type = go_type
        super().__init__(
            f"Package override `go_type` specifier {go_type!r} is not the proper format, "
            "expected 'modulepath.TypeName', e.g. 'github.com/segmentio/ksuid.KSUID'",
        )


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_empty_str(value: object) -> object:
    return "" if value is None else value


def _none_to_false(value: object) -> object:
    return False if value is None else value


class OverrideModel(BaseModel):
    """Pydantic model for one raw ``overrides`` entry.

    Attributes:
        go_type: Module-path qualified output type, e.g.
            ``github.com/segmentio/ksuid.KSUID``; a leading ``*`` marks a pointer.
        postgres_type: Source database type the override applies to.
        null: Whether the override applies to nullable values.
        column: Fully qualified column the override applies to, e.g. ``accounts.id``.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    go_type: StrictStr = ""
    postgres_type: StrictStr = ""
    null: StrictBool = False
    column: StrictStr = ""

    @field_validator("go_type", "postgres_type", "column", mode="before")
    @classmethod
    def _coerce_strings(cls, value: object) -> object:
        return _none_to_empty_str(value)

    @field_validator("null", mode="before")
    @classmethod
    def _coerce_null(cls, value: object) -> object:
        return _none_to_false(value)


class PackageSettingsModel(BaseModel):
    """Pydantic model for one raw ``packages`` entry."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    name: StrictStr = ""
    engine: Engine | None = None
    path: StrictStr = ""
    schema_path: StrictStr = Field(default="", alias="schema")
    queries: StrictStr = ""
    emit_interface: StrictBool = False
    emit_json_tags: StrictBool = False
    emit_prepared_queries: StrictBool = False
    overrides: list[OverrideModel] = Field(default_factory=list)

    @field_validator("engine", mode="before")
    @classmethod
    def _empty_engine(cls, value: object) -> object:
        # an empty engine is the same as an absent one; defaults apply later
        return None if value == "" else value

    @field_validator("name", "path", "schema_path", "queries", mode="before")
    @classmethod
    def _coerce_strings(cls, value: object) -> object:
        return _none_to_empty_str(value)

    @field_validator("emit_interface", "emit_json_tags", "emit_prepared_queries", mode="before")
    @classmethod
    def _coerce_flags(cls, value: object) -> object:
        return _none_to_false(value)

    @field_validator("overrides", mode="before")
    @classmethod
    def _coerce_overrides(cls, value: object) -> object:
        return _none_to_empty_list(value)


class GenerateSettingsModel(BaseModel):
    """Pydantic model for the top-level configuration document.

    Attributes:
        version: Document schema version; only ``"1"`` is supported.
        packages: Package entries in document order.
        overrides: Overrides applied to every package.
        rename: Rename hints for generated identifiers.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    version: StrictStr = ""
    packages: list[PackageSettingsModel] = Field(default_factory=list)
    overrides: list[OverrideModel] = Field(default_factory=list)
    rename: dict[str, str] = Field(default_factory=dict)

    @field_validator("packages", "overrides", mode="before")
    @classmethod
    def _coerce_lists(cls, value: object) -> object:
        return _none_to_empty_list(value)

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: object) -> object:
        return _none_to_empty_str(value)

    @field_validator("rename", mode="before")
    @classmethod
    def _coerce_rename(cls, value: object) -> object:
        return {} if value is None else value


@dataclass(slots=True, frozen=True)
class TableRef:
    """Fully qualified relation named by a column override.

    Attributes:
        relation: Table or view name.
        schema: Schema name (``public`` when the reference omitted it).
        catalog: Catalog name, empty when the reference omitted it.
    """

    relation: str
    schema: str
    catalog: str = ""

    def __str__(self) -> str:
        parts = (self.catalog, self.schema, self.relation)
        return COLUMN_SEPARATOR.join(part for part in parts if part)


@dataclass(slots=True, frozen=True)
class ColumnTarget:
    """Override target selecting a single column."""

    table: TableRef
    column: str

    def __str__(self) -> str:
        return f"{self.table}{COLUMN_SEPARATOR}{self.column}"


@dataclass(slots=True, frozen=True)
class SourceTypeTarget:
    """Override target selecting every value of a source database type.

    Attributes:
        type_name: Bare type name, e.g. ``timestamp``.
        namespace: Qualifying namespace, e.g. ``pg_catalog``, when one was given.
    """

    type_name: str
    namespace: str | None = None

    def __str__(self) -> str:
        if self.namespace is None:
            return self.type_name
        return f"{self.namespace}{TYPE_NAME_SEPARATOR}{self.type_name}"


OverrideTarget: TypeAlias = ColumnTarget | SourceTypeTarget


@dataclass(slots=True, frozen=True)
class GoTypeRef:
    """Resolved output type of an override.

    Attributes:
        module: Module path that declares the type, without any pointer sigil.
        name: Type name; carries the leading ``*`` when ``pointer`` is set.
        pointer: Whether the output type is a pointer to ``module.name``.
    """

    module: str
    name: str
    pointer: bool = False


@dataclass(slots=True, frozen=True)
class Override:
    """A resolved override.

    The raw document fields are kept verbatim next to the resolved ``target``
    and ``go_type_ref`` so diagnostics can quote what the user wrote.
    """

    go_type: str
    go_type_ref: GoTypeRef
    target: OverrideTarget
    null: bool = False
    column: str = ""
    postgres_type: str = ""

    @property
    def go_type_name(self) -> str:
        """Output type name, including the ``*`` of pointer types."""
        return self.go_type_ref.name

    @property
    def go_package(self) -> str:
        """Module path that declares the output type."""
        return self.go_type_ref.module

    @property
    def table(self) -> TableRef | None:
        """Relation of a column override; ``None`` for source-type overrides."""
        return self.target.table if isinstance(self.target, ColumnTarget) else None

    @property
    def column_name(self) -> str | None:
        """Column of a column override; ``None`` for source-type overrides."""
        return self.target.column if isinstance(self.target, ColumnTarget) else None


@dataclass(slots=True, frozen=True)
class PackageSettings:
    """Validated settings for one generation package.

    Attributes:
        name: Package name; defaults to the basename of ``path``.
        path: Output directory of the generated package.
        engine: SQL dialect of the schema and queries.
        schema: Location of the schema files.
        queries: Location of the query files.
        emit_interface: Emit a querier interface.
        emit_json_tags: Emit JSON struct tags.
        emit_prepared_queries: Emit prepared-statement support.
        overrides: Package-scoped overrides in document order.
    """

    name: str
    path: str
    engine: Engine = Engine.POSTGRESQL
    schema: str = ""
    queries: str = ""
    emit_interface: bool = False
    emit_json_tags: bool = False
    emit_prepared_queries: bool = False
    overrides: tuple[Override, ...] = ()


def _empty_package_map() -> Mapping[str, PackageSettings]:
    return MappingProxyType({})


@dataclass(slots=True, frozen=True)
class GenerateSettings:
    """Validated top-level configuration.

    ``package_map`` is derived from ``packages`` on every load and is read-only.
    """

    version: str
    packages: tuple[PackageSettings, ...]
    overrides: tuple[Override, ...] = ()
    rename: Mapping[str, str] = field(default_factory=dict)
    package_map: Mapping[str, PackageSettings] = field(default_factory=_empty_package_map)


__all__ = [
    "ColumnTarget",
    "ConfigDecodeError",
    "ConfigNotFoundError",
    "ConfigReadError",
    "ConfigValidationError",
    "GenerateSettings",
    "GenerateSettingsModel",
    "GoTypeRef",
    "InvalidColumnReferenceError",
    "InvalidTypeReferenceError",
    "MissingVersionError",
    "NoPackageNameError",
    "NoPackagePathError",
    "NoPackagesError",
    "Override",
    "OverrideConflictError",
    "OverrideError",
    "OverrideModel",
    "OverrideTarget",
    "OverrideTargetMissingError",
    "PackageSettings",
    "PackageSettingsModel",
    "SourceTypeTarget",
    "TableRef",
    "UnknownVersionError",
]
