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

"""Resolution of raw ``overrides`` entries into typed override values.

An override redirects the generated type for either one column
(``column = "accounts.id"``) or every value of a source type
(``postgres_type = "uuid"``) to a caller-chosen output type
(``go_type = "github.com/segmentio/ksuid.KSUID"``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from querygen.config.constants import (
    COLUMN_SEPARATOR,
    DEFAULT_SCHEMA,
    MODULE_PATH_SEPARATOR,
    POINTER_SIGIL,
    TYPE_NAME_SEPARATOR,
)
from querygen.config.models import (
    ColumnTarget,
    GoTypeRef,
    InvalidColumnReferenceError,
    InvalidTypeReferenceError,
    Override,
    OverrideConflictError,
    OverrideTargetMissingError,
    SourceTypeTarget,
    TableRef,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from querygen.config.models import OverrideModel, OverrideTarget


def parse_column_reference(column: str) -> ColumnTarget:
    """Split a ``[catalog.][schema.]relation.column`` reference.

    Args:
        column: Dot-separated column reference with two to four segments.

    Returns:
        ColumnTarget: The decomposed table reference and column name. A
        two-segment reference lands in the ``public`` schema.

    Raises:
        InvalidColumnReferenceError: If the reference does not have two, three
            or four segments.
    """
    parts = column.split(COLUMN_SEPARATOR)
    match parts:
        case [relation, name]:
            table = TableRef(relation=relation, schema=DEFAULT_SCHEMA)
        case [schema, relation, name]:
            table = TableRef(relation=relation, schema=schema)
        case [catalog, schema, relation, name]:
            table = TableRef(relation=relation, schema=schema, catalog=catalog)
        case _:
            raise InvalidColumnReferenceError(column)
    return ColumnTarget(table=table, column=name)


def parse_source_type(postgres_type: str) -> SourceTypeTarget:
    """Split a source type such as ``pg_catalog.timestamp`` into namespace and name.

    Args:
        postgres_type: The ``postgres_type`` value of an override.

    Returns:
        SourceTypeTarget: The target; ``namespace`` is ``None`` for a bare name.
    """
    namespace, sep, type_name = postgres_type.rpartition(TYPE_NAME_SEPARATOR)
    if not sep:
        return SourceTypeTarget(type_name=postgres_type)
    return SourceTypeTarget(type_name=type_name, namespace=namespace)


def parse_type_reference(go_type: str) -> GoTypeRef:
    """Split a ``modulepath.TypeName`` reference into module and type name.

    The split happens on the last ``.``, so dotted hosts such as
    ``github.com`` stay in the module path. A leading ``*`` moves from the
    module path onto the type name and sets ``pointer``.

    Args:
        go_type: Output type reference, e.g. ``*github.com/segmentio/ksuid.KSUID``.

    Returns:
        GoTypeRef: The resolved module path, type name and pointer flag.

    Raises:
        InvalidTypeReferenceError: If the reference lacks a ``.`` or a ``/``.
    """
    if TYPE_NAME_SEPARATOR not in go_type or MODULE_PATH_SEPARATOR not in go_type:
        raise InvalidTypeReferenceError(go_type)
    module, _, type_name = go_type.rpartition(TYPE_NAME_SEPARATOR)
    pointer = go_type.startswith(POINTER_SIGIL)
    if pointer:
        module = module.removeprefix(POINTER_SIGIL)
        type_name = POINTER_SIGIL + type_name
    return GoTypeRef(module=module, name=type_name, pointer=pointer)


def resolve_override(model: OverrideModel) -> Override:
    """Validate a raw override and resolve its target and output type.

    Args:
        model: The raw override as decoded from the document.

    Returns:
        Override: The resolved, read-only override.

    Raises:
        OverrideConflictError: If both ``column`` and ``postgres_type`` are set.
        OverrideTargetMissingError: If neither is set.
        InvalidColumnReferenceError: If ``column`` is malformed.
        InvalidTypeReferenceError: If ``go_type`` is malformed.
    """
    if model.column and model.postgres_type:
        raise OverrideConflictError(model.column, model.postgres_type)
    if not model.column and not model.postgres_type:
        raise OverrideTargetMissingError

    target: OverrideTarget
    if model.column:
        target = parse_column_reference(model.column)
    else:
        target = parse_source_type(model.postgres_type)

    return Override(
        go_type=model.go_type,
        go_type_ref=parse_type_reference(model.go_type),
        target=target,
        null=model.null,
        column=model.column,
        postgres_type=model.postgres_type,
    )


def resolve_overrides(models: Iterable[OverrideModel]) -> tuple[Override, ...]:
    """Resolve overrides in order, stopping at the first invalid entry."""
    return tuple(resolve_override(model) for model in models)


__all__ = [
    "parse_column_reference",
    "parse_source_type",
    "parse_type_reference",
    "resolve_override",
    "resolve_overrides",
]
