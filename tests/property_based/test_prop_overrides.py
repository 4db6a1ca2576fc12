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

"""Property-based tests for override reference parsing."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from querygen.config import InvalidColumnReferenceError, InvalidTypeReferenceError
from querygen.config.overrides import parse_column_reference, parse_type_reference
from tests.property_based.strategies import identifiers, module_paths

pytestmark = pytest.mark.property


@given(parts=st.lists(identifiers(), min_size=3, max_size=4))
def test_h_qualified_column_references_round_trip(parts: list[str]) -> None:
    reference = ".".join(parts)

    target = parse_column_reference(reference)

    assert str(target) == reference
    assert target.column == parts[-1]
    assert target.table.relation == parts[-2]


@given(relation=identifiers(), column=identifiers())
def test_h_unqualified_columns_land_in_public(relation: str, column: str) -> None:
    target = parse_column_reference(f"{relation}.{column}")

    assert target.table.schema == "public"
    assert target.table.catalog == ""
    assert str(target) == f"public.{relation}.{column}"


@given(parts=st.one_of(st.lists(identifiers(), max_size=1), st.lists(identifiers(), min_size=5, max_size=8)))
def test_h_other_segment_counts_are_rejected(parts: list[str]) -> None:
    with pytest.raises(InvalidColumnReferenceError):
        _ = parse_column_reference(".".join(parts))


@given(module=module_paths(), name=identifiers(), pointer=st.booleans())
def test_h_type_references_split_on_last_dot(module: str, name: str, pointer: bool) -> None:
    sigil = "*" if pointer else ""

    ref = parse_type_reference(f"{sigil}{module}.{name}")

    assert ref.module == module
    assert ref.name == f"{sigil}{name}"
    assert ref.pointer is pointer


@given(name=identifiers())
def test_h_references_without_module_path_are_rejected(name: str) -> None:
    with pytest.raises(InvalidTypeReferenceError):
        _ = parse_type_reference(f"pkg.{name}")
