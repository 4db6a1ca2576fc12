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

"""Configuration loading for querygen.

This module reads a configuration document from a stream or a file, decodes it
strictly (any unrecognised field is an error) and hands the result to
:func:`querygen.config.validation.validate_settings`. JSON is the canonical
format; TOML documents with the same layout are accepted too.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, TYPE_CHECKING

from pydantic import ValidationError

from querygen._internal.logging_utils import structured_extra
from querygen.compat import tomllib
from querygen.config.constants import CONFIG_FILENAMES
from querygen.config.models import (
    ConfigDecodeError,
    ConfigNotFoundError,
    ConfigReadError,
    GenerateSettingsModel,
)
from querygen.config.validation import validate_settings
from querygen.core.model_types import ConfigFormat, LogComponent

if TYPE_CHECKING:
    from querygen.config.models import GenerateSettings

logger: logging.Logger = logging.getLogger("querygen.config")

STREAM_SOURCE = "<stream>"


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for loaded settings and the file they came from.

    Attributes:
        settings: Validated settings.
        path: Resolved path of the configuration file.
        format: Format the file was decoded as.
    """

    settings: GenerateSettings
    path: Path
    format: ConfigFormat


def decode_document(
    data: str | bytes,
    *,
    fmt: ConfigFormat | str = ConfigFormat.JSON,
    source: str = STREAM_SOURCE,
) -> GenerateSettingsModel:
    """Decode a document strictly into the raw document model.

    Args:
        data: Whole document contents.
        fmt: Serialisation format of ``data``.
        source: Name used in error messages.

    Returns:
        GenerateSettingsModel: The decoded, not yet validated, document.

    Raises:
        ConfigDecodeError: If the document is malformed or has unknown fields.
    """
    config_format = fmt if isinstance(fmt, ConfigFormat) else ConfigFormat.from_str(fmt)
    try:
        if config_format is ConfigFormat.TOML:
            text = data.decode("utf-8") if isinstance(data, bytes) else data
            return GenerateSettingsModel.model_validate(tomllib.loads(text))
        return GenerateSettingsModel.model_validate_json(data)
    except (ValidationError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigDecodeError(source, exc) from exc


def parse_config(
    stream: IO[str] | IO[bytes],
    *,
    fmt: ConfigFormat | str = ConfigFormat.JSON,
    source: str = STREAM_SOURCE,
) -> GenerateSettings:
    """Read a configuration document from a stream, decode and validate it.

    The stream is read to completion before decoding starts.

    Args:
        stream: Readable text or binary stream holding the document.
        fmt: Serialisation format of the document.
        source: Name used in error messages and log records.

    Returns:
        GenerateSettings: Fully validated settings with the package index built.

    Raises:
        ConfigDecodeError: If the document is malformed or has unknown fields.
        ConfigValidationError: If the decoded document fails validation.
    """
    model = decode_document(stream.read(), fmt=fmt, source=source)
    settings = validate_settings(model)
    logger.debug(
        "Loaded %d package(s) from %s",
        len(settings.packages),
        source,
        extra=structured_extra(
            LogComponent.CONFIG,
            path=source,
            format=str(fmt),
            packages=len(settings.packages),
            overrides=len(settings.overrides),
        ),
    )
    return settings


def format_for_path(path: Path) -> ConfigFormat:
    """Pick the document format from a file suffix (``.toml`` or JSON)."""
    return ConfigFormat.TOML if path.suffix.lower() == ".toml" else ConfigFormat.JSON


def discover_config_path(base_dir: Path | None = None) -> Path:
    """Locate the configuration file in ``base_dir``.

    Candidates are checked in ``CONFIG_FILENAMES`` order and the first existing
    file wins.

    Args:
        base_dir: Directory to search; defaults to the current directory.

    Returns:
        Path: The first candidate that exists.

    Raises:
        ConfigNotFoundError: If none of the candidates exist.
    """
    root = base_dir if base_dir is not None else Path.cwd()
    candidates = tuple(root / filename for filename in CONFIG_FILENAMES)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    raise ConfigNotFoundError(candidates)


def load_config(explicit_path: Path | None = None) -> GenerateSettings:
    """Load and validate querygen configuration from a file.

    Args:
        explicit_path: Configuration file to load. When ``None`` the current
            directory is searched for a known configuration filename.

    Returns:
        GenerateSettings: Fully validated settings.
    """
    return load_config_with_metadata(explicit_path).settings


def load_config_with_metadata(explicit_path: Path | None = None) -> LoadedConfig:
    """Load configuration together with the path and format it came from.

    Args:
        explicit_path: Configuration file to load. When ``None`` the current
            directory is searched for a known configuration filename.

    Returns:
        LoadedConfig: Validated settings, the resolved source path and format.

    Raises:
        ConfigNotFoundError: If no configuration file exists.
        ConfigReadError: If the file cannot be read.
        ConfigDecodeError: If the file is malformed or has unknown fields.
        ConfigValidationError: If the decoded document fails validation.
    """
    if explicit_path is None:
        path = discover_config_path()
    elif explicit_path.exists():
        path = explicit_path
    else:
        raise ConfigNotFoundError((explicit_path,))
    config_format = format_for_path(path)
    try:
        with path.open("rb") as stream:
            settings = parse_config(stream, fmt=config_format, source=str(path))
    # ignore JUSTIFIED: filesystem errors depend on host configuration
    except OSError as exc:  # pragma: no cover - IO errors
        raise ConfigReadError(path, exc) from exc
    return LoadedConfig(settings=settings, path=path.resolve(), format=config_format)


__all__ = [
    "LoadedConfig",
    "decode_document",
    "discover_config_path",
    "format_for_path",
    "load_config",
    "load_config_with_metadata",
    "parse_config",
]
