# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (input loading, errors, logging)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from ..config import ConfigError, load_options
from ..core.logging import enable_debug_logging, fail
from ..core.models import CompileDiagnostic, DiagnosticPayloadError, ResolvedOptions

DIAGNOSTIC_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="JSON file holding the compiler diagnostic."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Enable debug verbosity and log to stderr."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path`` or raise :class:`CLIError`."""

    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"unable to read {path}: {exc.strerror or exc}") from exc


def load_diagnostic(path: Path) -> CompileDiagnostic:
    """Load a compiler diagnostic serialized as JSON at ``path``.

    Args:
        path: File containing a single diagnostic JSON object.

    Returns:
        CompileDiagnostic: Validated diagnostic.

    Raises:
        CLIError: If the file cannot be read, decoded or validated.
    """

    text = read_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CLIError(f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    try:
        return CompileDiagnostic.from_payload(payload)
    except DiagnosticPayloadError as exc:
        raise CLIError(f"{path}: {exc}") from exc


def resolve_cli_options(*, build: bool, debug: bool) -> ResolvedOptions:
    """Build :class:`ResolvedOptions` from CLI flags and enable debug logging when requested."""

    try:
        options = load_options({"is_build": build, "is_debug": debug})
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    if options.is_debug:
        enable_debug_logging()
    return options


def exit_with_error(error: CLIError) -> NoReturn:
    """Report ``error`` on the console and terminate the command."""

    fail(str(error), use_emoji=False)
    raise typer.Exit(code=error.exit_code) from error


__all__ = [
    "DEBUG_OPTION",
    "DIAGNOSTIC_ARGUMENT",
    "CLIError",
    "exit_with_error",
    "load_diagnostic",
    "read_text",
    "resolve_cli_options",
]
