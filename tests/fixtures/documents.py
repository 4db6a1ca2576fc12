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

"""Builders for configuration documents used across the test suite."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

from querygen.config import GenerateSettings, parse_config

if TYPE_CHECKING:
    from pathlib import Path

__all__ = ["document", "load_document", "override", "package", "write_document"]


def override(go_type: str = "github.com/segmentio/ksuid.KSUID", **fields: object) -> dict[str, object]:
    """Return a raw override entry; pass ``column`` or ``postgres_type``."""
    return {"go_type": go_type, **fields}


def package(path: str = "internal/db", **fields: object) -> dict[str, object]:
    """Return a raw package entry with only ``path`` set unless told otherwise."""
    return {"path": path, **fields}


def document(*packages: dict[str, object], version: str | None = "1", **fields: object) -> dict[str, object]:
    """Return a raw document; defaults to one minimal package.

    Passing ``version=None`` leaves the version field out entirely.
    """
    payload: dict[str, object] = {}
    if version is not None:
        payload["version"] = version
    payload["packages"] = list(packages) if packages else [package()]
    payload.update(fields)
    return payload


def load_document(payload: dict[str, object]) -> GenerateSettings:
    """Serialise ``payload`` to JSON and load it through a text stream."""
    return parse_config(io.StringIO(json.dumps(payload)))


def write_document(directory: Path, payload: dict[str, object], filename: str = "querygen.json") -> Path:
    """Write ``payload`` as JSON into ``directory`` and return the file path."""
    path = directory / filename
    _ = path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path
