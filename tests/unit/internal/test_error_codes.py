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

"""Unit tests for the error code registry."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from querygen._internal.error_codes import error_code_catalog, error_code_for
from querygen._internal.exceptions import QuerygenError, QuerygenValidationError
from querygen.config import (
    ConfigDecodeError,
    ConfigValidationError,
    InvalidTypeReferenceError,
    MissingVersionError,
    NoPackagePathError,
    OverrideError,
)

pytestmark = pytest.mark.unit


def test_error_code_for_known_hierarchy() -> None:
    assert error_code_for(QuerygenError("x")) == "QG000"
    assert error_code_for(QuerygenValidationError("x")) == "QG100"
    assert error_code_for(ConfigValidationError("x")) == "QG110"
    assert error_code_for(ConfigDecodeError("<stream>", ValueError("bad"))) == "QG113"
    assert error_code_for(MissingVersionError()) == "QG120"
    assert error_code_for(NoPackagePathError(0)) == "QG123"
    assert error_code_for(InvalidTypeReferenceError("badtype")) == "QG134"


def test_error_code_for_subclass_falls_back_to_parent() -> None:
    class CustomOverrideError(OverrideError):
        pass

    assert error_code_for(CustomOverrideError("x")) == "QG130"


def test_error_code_for_unknown_defaults_to_base() -> None:
    class CustomError(RuntimeError):
        pass

    assert error_code_for(CustomError("x")) == "QG000"


def test_config_errors_are_value_errors() -> None:
    assert isinstance(MissingVersionError(), ValueError)


def test_error_code_catalog_uniqueness() -> None:
    catalog = error_code_catalog()
    codes = list(catalog.values())
    assert len(set(codes)) == len(codes)
    assert catalog["querygen._internal.exceptions.QuerygenError"] == "QG000"


def test_error_code_documentation_is_in_sync() -> None:
    catalog = error_code_catalog()
    repo_root = Path(__file__).resolve().parents[3]
    doc_path = repo_root / "docs" / "EXCEPTIONS.md"
    content = doc_path.read_text(encoding="utf-8")
    documented_codes = set(re.findall(r"QG\d{3}", content))
    registry_codes = set(catalog.values())
    assert registry_codes == documented_codes


def test_hint_defaults_to_none_outside_version_and_package_errors() -> None:
    assert QuerygenError("x").hint is None
    assert ConfigDecodeError("<stream>", ValueError("bad")).hint is None
    assert MissingVersionError().hint is not None
