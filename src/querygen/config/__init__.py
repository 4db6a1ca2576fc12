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

"""Configuration management for querygen.

This package loads a querygen configuration document, validates it, applies
per-package defaults and resolves type overrides. Code generators receive the
resulting :class:`GenerateSettings` and its ``package_map``.
"""

from __future__ import annotations

from .loader import (
    LoadedConfig,
    decode_document,
    discover_config_path,
    load_config,
    load_config_with_metadata,
    parse_config,
)
from .models import (
    ColumnTarget,
    ConfigDecodeError,
    ConfigNotFoundError,
    ConfigReadError,
    ConfigValidationError,
    GenerateSettings,
    GenerateSettingsModel,
    GoTypeRef,
    InvalidColumnReferenceError,
    InvalidTypeReferenceError,
    MissingVersionError,
    NoPackageNameError,
    NoPackagePathError,
    NoPackagesError,
    Override,
    OverrideConflictError,
    OverrideError,
    OverrideModel,
    OverrideTarget,
    OverrideTargetMissingError,
    PackageSettings,
    PackageSettingsModel,
    SourceTypeTarget,
    TableRef,
    UnknownVersionError,
)
from .overrides import resolve_override
from .serialization import settings_to_dict
from .validation import build_package_map, validate_settings

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
    "LoadedConfig",
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
    "build_package_map",
    "decode_document",
    "discover_config_path",
    "load_config",
    "load_config_with_metadata",
    "parse_config",
    "resolve_override",
    "settings_to_dict",
    "validate_settings",
]
