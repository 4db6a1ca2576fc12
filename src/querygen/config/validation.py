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

"""Validation and normalisation of decoded configuration documents.

Validation is a single fail-fast pass: the first problem raises and nothing
further is checked. Checks run in document order so the error a user sees is
always the earliest one in their file.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING

from querygen._internal.logging_utils import structured_extra
from querygen.config.constants import SUPPORTED_VERSION
from querygen.config.models import (
    GenerateSettings,
    MissingVersionError,
    NoPackageNameError,
    NoPackagePathError,
    NoPackagesError,
    PackageSettings,
    UnknownVersionError,
)
from querygen.config.overrides import resolve_overrides
from querygen.core.model_types import Engine, LogComponent

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from querygen.config.models import GenerateSettingsModel, PackageSettingsModel

logger: logging.Logger = logging.getLogger("querygen.config")


def package_basename(path: str) -> str:
    """Return the final segment of a package path.

    Trailing separators are ignored and the filesystem is never consulted.
    Paths without a usable final segment (``"/"``, ``"."``) yield ``""``.

    Args:
        path: Package output path as written in the document.

    Returns:
        The last path segment, or an empty string.
    """
    return PurePath(path).name


def validate_settings(model: GenerateSettingsModel) -> GenerateSettings:
    """Validate a decoded document and build the runtime settings.

    Args:
        model: The strictly decoded document.

    Returns:
        GenerateSettings: Settings with defaults applied, overrides resolved and
        the package index attached.

    Raises:
        MissingVersionError: If the version is empty.
        UnknownVersionError: If the version is not the supported one.
        NoPackagesError: If no packages are configured.
        NoPackagePathError: If a package has no path.
        NoPackageNameError: If a package name is still empty when indexing.
        OverrideError: If any override fails to resolve.
    """
    if not model.version:
        raise MissingVersionError
    if model.version != SUPPORTED_VERSION:
        raise UnknownVersionError(model.version)
    if not model.packages:
        raise NoPackagesError

    overrides = resolve_overrides(model.overrides)
    packages = tuple(_validate_package(index, package) for index, package in enumerate(model.packages))
    return GenerateSettings(
        version=model.version,
        packages=packages,
        overrides=overrides,
        rename=MappingProxyType(dict(model.rename)),
        package_map=build_package_map(packages),
    )


def _validate_package(index: int, model: PackageSettingsModel) -> PackageSettings:
    if not model.path:
        raise NoPackagePathError(index)
    overrides = resolve_overrides(model.overrides)

    name = model.name
    if not name:
        name = package_basename(model.path)
        logger.debug(
            "Package %d named %r from path %r",
            index,
            name,
            model.path,
            extra=structured_extra(LogComponent.CONFIG, package=name, path=model.path),
        )
    engine = model.engine
    if engine is None:
        engine = Engine.POSTGRESQL
        logger.debug(
            "Package %r defaults to engine %s",
            name,
            engine,
            extra=structured_extra(LogComponent.CONFIG, package=name),
        )

    return PackageSettings(
        name=name,
        path=model.path,
        engine=engine,
        schema=model.schema_path,
        queries=model.queries,
        emit_interface=model.emit_interface,
        emit_json_tags=model.emit_json_tags,
        emit_prepared_queries=model.emit_prepared_queries,
        overrides=overrides,
    )


def build_package_map(packages: Iterable[PackageSettings]) -> Mapping[str, PackageSettings]:
    """Index packages by name.

    Later packages replace earlier ones that share a name; no error is raised
    for duplicates.

    Args:
        packages: Validated packages in document order.

    Returns:
        Read-only mapping from package name to settings.

    Raises:
        NoPackageNameError: If a package has an empty name.
    """
    package_map: dict[str, PackageSettings] = {}
    for package in packages:
        if not package.name:
            raise NoPackageNameError(package.path)
        if package.name in package_map:
            logger.debug(
                "Package %r is configured more than once; the last entry wins",
                package.name,
                extra=structured_extra(LogComponent.CONFIG, package=package.name, path=package.path),
            )
        package_map[package.name] = package
    return MappingProxyType(package_map)


__all__ = ["build_package_map", "package_basename", "validate_settings"]
