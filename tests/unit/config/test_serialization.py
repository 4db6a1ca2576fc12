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

"""Unit tests for rendering settings back to the document layout."""

from __future__ import annotations

import pytest

from querygen.config import settings_to_dict
from tests.fixtures.documents import document, load_document, override, package

pytestmark = pytest.mark.unit


def test_defaults_are_rendered_explicitly() -> None:
    payload = settings_to_dict(load_document(document(package("internal/authors"))))

    assert payload == {
        "version": "1",
        "packages": [
            {
                "name": "authors",
                "engine": "postgresql",
                "path": "internal/authors",
                "schema": "",
                "queries": "",
                "emit_interface": False,
                "emit_json_tags": False,
                "emit_prepared_queries": False,
                "overrides": [],
            },
        ],
    }


def test_empty_global_sections_are_omitted() -> None:
    payload = settings_to_dict(load_document(document()))

    assert "overrides" not in payload
    assert "rename" not in payload


def test_overrides_keep_only_the_target_that_was_set() -> None:
    settings = load_document(
        document(
            package("internal/db", overrides=[override(go_type="*example.com/types.ID", column="db.users.id")]),
            overrides=[override(postgres_type="uuid", null=True)],
            rename={"id": "ID"},
        ),
    )

    payload = settings_to_dict(settings)

    assert payload["overrides"] == [
        {"go_type": "github.com/segmentio/ksuid.KSUID", "postgres_type": "uuid", "null": True},
    ]
    assert payload["rename"] == {"id": "ID"}
    packages = payload["packages"]
    assert isinstance(packages, list)
    assert packages[0]["overrides"] == [
        {"go_type": "*example.com/types.ID", "column": "db.users.id", "null": False},
    ]


def test_rendered_settings_load_back_unchanged() -> None:
    settings = load_document(
        document(
            package("internal/db", engine="mysql", emit_json_tags=True, overrides=[override(column="users.id")]),
            package("internal/reports", name="analytics"),
            overrides=[override(postgres_type="pg_catalog.timestamp")],
        ),
    )

    assert load_document(settings_to_dict(settings)) == settings
