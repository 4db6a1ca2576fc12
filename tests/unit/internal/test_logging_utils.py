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

"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from querygen._internal.logging_utils import LOG_LEVELS, configure_logging, structured_extra
from querygen.core.model_types import LogComponent, LogFormat

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: pytest.CaptureFixture[str]) -> None:
    config = configure_logging("json", log_level="debug")
    logger = logging.getLogger("querygen.config")
    logger.debug(
        "loaded",
        extra=structured_extra(LogComponent.CONFIG, path="querygen.json", packages=2, format="json"),
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    lines = [line for line in captured.err.splitlines() if line]

    assert config.format is LogFormat.JSON
    payload = json.loads(lines[-2])
    assert payload["message"] == "loaded"
    assert payload["level"] == "debug"
    assert payload["logger"] == "querygen.config"
    assert payload["component"] == "config"
    assert payload["path"] == "querygen.json"
    assert payload["packages"] == 2
    assert "exc_info" in json.loads(lines[-1])


def test_configure_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    _ = configure_logging("text", log_level="warning")
    logger = logging.getLogger("querygen")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()

    assert "ignored" not in captured.err
    assert "[WARNING] recorded" in captured.err


def test_configure_logging_honors_env_overrides(
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("QUERYGEN_LOG_FORMAT", "json")
    monkeypatch.setenv("QUERYGEN_LOG_LEVEL", "error")
    config = configure_logging()
    logger = logging.getLogger("querygen.cli")
    logger.warning("warned")
    logger.error("failed", extra=structured_extra(LogComponent.CLI, error_code="QG120"))
    captured = capsys.readouterr()
    lines = [line for line in captured.err.splitlines() if line]

    assert config.level == logging.ERROR
    assert json.loads(lines[-1])["error_code"] == "QG120"
    assert all("warned" not in line for line in lines)


def test_structured_extra_drops_empty_values(tmp_path: Path) -> None:
    extra = structured_extra(
        LogComponent.CONFIG,
        path=tmp_path / "querygen.json",
        package=None,
        details={},
        overrides=3,
    )

    assert extra == {
        "component": LogComponent.CONFIG,
        "path": str(tmp_path / "querygen.json"),
        "overrides": 3,
    }


def test_unknown_log_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = configure_logging("xml")
