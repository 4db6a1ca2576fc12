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

"""Rendering of validated settings back into the document layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from querygen.config.models import GenerateSettings, Override, PackageSettings


def override_to_dict(override: Override) -> dict[str, object]:
    """Return the document form of an override.

    Only the target field that was set (``column`` or ``postgres_type``) is
    included.
    """
    payload: dict[str, object] = {"go_type": override.go_type}
    if override.column:
        payload["column"] = override.column
    else:
        payload["postgres_type"] = override.postgres_type
    payload["null"] = override.null
    return payload


def package_to_dict(package: PackageSettings) -> dict[str, object]:
    return {
        "name": package.name,
        "engine": package.engine.value,
        "path": package.path,
        "schema": package.schema,
        "queries": package.queries,
        "emit_interface": package.emit_interface,
        "emit_json_tags": package.emit_json_tags,
        "emit_prepared_queries": package.emit_prepared_queries,
        "overrides": [override_to_dict(item) for item in package.overrides],
    }


def settings_to_dict(settings: GenerateSettings) -> dict[str, object]:
    """Return validated settings in document layout.

    Names and engines appear with their defaults applied. Empty global
    ``overrides`` and ``rename`` sections are left out, so the result loads
    back into equal settings.

    Args:
        settings: Validated settings.

    Returns:
        JSON-compatible mapping.
    """
    payload: dict[str, object] = {
        "version": settings.version,
        "packages": [package_to_dict(package) for package in settings.packages],
    }
    if settings.overrides:
        payload["overrides"] = [override_to_dict(item) for item in settings.overrides]
    if settings.rename:
        payload["rename"] = dict(settings.rename)
    return payload


__all__ = ["override_to_dict", "package_to_dict", "settings_to_dict"]
