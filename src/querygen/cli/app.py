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

"""CLI entry point and orchestration for querygen commands."""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
from collections.abc import Callable, Sequence
from textwrap import dedent
from typing import Final

from querygen import __version__
from querygen._internal.error_codes import error_code_for
from querygen.cli.io import echo
from querygen.config import (
    ConfigValidationError,
    LoadedConfig,
    load_config_with_metadata,
    settings_to_dict,
)
from querygen.config.constants import DEFAULT_CONFIG_FILENAME
from querygen.core.model_types import LogComponent
from querygen.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra

logger: logging.Logger = logging.getLogger("querygen.cli")

QUERYGEN_VERSION: Final[str] = __version__

CONFIG_TEMPLATE: Final[str] = dedent(
    """\
    {
      "version": "1",
      "packages": [
        {
          "name": "db",
          "path": "internal/db",
          "engine": "postgresql",
          "schema": "sql/schema",
          "queries": "sql/queries",
          "emit_interface": false,
          "emit_json_tags": false,
          "emit_prepared_queries": false,
          "overrides": []
        }
      ]
    }
    """,
)

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the querygen command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler (0 for success, non-zero for failure).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        echo(f"querygen {QUERYGEN_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _ = configure_logging(
        getattr(args, "log_format", None),
        log_level=getattr(args, "log_level", None),
    )
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    return handler(args)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=argparse.SUPPRESS,
        help="Select logging output format (human-readable text or structured JSON; default: $QUERYGEN_LOG_FORMAT or text).",
    )
    common.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=argparse.SUPPRESS,
        help="Set verbosity of logged events (default: $QUERYGEN_LOG_LEVEL or info).",
    )
    parser = argparse.ArgumentParser(
        prog="querygen",
        parents=[common],
        description="Validate querygen configuration for SQL code generation.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the querygen version and exit.",
    )
    subparsers = parser.add_subparsers(dest="command")

    for name, help_text in (
        ("check", "Load and validate the configuration file"),
        ("show", "Print the validated configuration as JSON"),
    ):
        command = subparsers.add_parser(
            name,
            help=help_text,
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
            parents=[common],
        )
        command.add_argument(
            "-c",
            "--config",
            type=pathlib.Path,
            default=None,
            help="Configuration file to load (searched for in the current directory by default).",
        )

    init = subparsers.add_parser(
        "init",
        help="Generate a starter configuration file",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=[common],
    )
    init.add_argument(
        "-s",
        "--save-as",
        dest="output",
        type=pathlib.Path,
        default=pathlib.Path(DEFAULT_CONFIG_FILENAME),
        help="Destination for the generated configuration file.",
    )
    init.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )
    return parser


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "check": _handle_check,
        "show": _handle_show,
        "init": _handle_init,
    }


def _load(args: argparse.Namespace) -> LoadedConfig | None:
    try:
        return load_config_with_metadata(args.config)
    except ConfigValidationError as exc:
        report_error(exc)
        return None


def report_error(exc: ConfigValidationError) -> None:
    """Print a configuration error verbatim, followed by its hint if any.

    Args:
        exc: The configuration error that stopped the command.
    """
    code = error_code_for(exc)
    logger.debug(
        "Configuration rejected: %s",
        type(exc).__name__,
        extra=structured_extra(LogComponent.CLI, error_code=code),
    )
    echo(f"error [{code}]: {exc}", err=True)
    if exc.hint:
        echo(exc.hint.rstrip("\n"), err=True)


def _handle_check(args: argparse.Namespace) -> int:
    loaded = _load(args)
    if loaded is None:
        return 1
    settings = loaded.settings
    echo(f"[querygen] {loaded.path}: {len(settings.packages)} package(s), version {settings.version}")
    for package in settings.packages:
        echo(
            f"  {package.name}: engine={package.engine} path={package.path} overrides={len(package.overrides)}",
        )
    if settings.overrides:
        echo(f"  global overrides: {len(settings.overrides)}")
    return 0


def _handle_show(args: argparse.Namespace) -> int:
    loaded = _load(args)
    if loaded is None:
        return 1
    echo(json.dumps(settings_to_dict(loaded.settings), indent=2))
    return 0


def _handle_init(args: argparse.Namespace) -> int:
    return write_config_template(args.output, force=args.force)


def write_config_template(path: pathlib.Path, *, force: bool) -> int:
    """Write the querygen configuration template to a file.

    Args:
        path: Target path where the configuration file will be written.
        force: If True, overwrite the file if it already exists. If False, refuse to overwrite.

    Returns:
        int: Exit code (0 for success, 1 for failure).
    """
    if path.exists() and not force:
        echo(f"[querygen] Refusing to overwrite existing file: {path}", err=True)
        echo("Use --force if you want to replace it.", err=True)
        return 1
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(CONFIG_TEMPLATE, encoding="utf-8")
    echo(f"[querygen] Wrote starter config to {path}")
    return 0


__all__ = ["CONFIG_TEMPLATE", "main", "report_error", "write_config_template"]
