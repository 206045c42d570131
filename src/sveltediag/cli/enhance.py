# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``enhance`` command: add preprocessing hints to a compiler error."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from ..config import debug_requested
from ..core.logging import build_extended_log_message, enable_debug_logging
from ..core.models import PreprocessorDescriptor
from ..core.serialization import dumps
from ..diagnostics.enhance import enhance_compile_error
from .shared import DEBUG_OPTION, DIAGNOSTIC_ARGUMENT, CLIError, exit_with_error, load_diagnostic, read_text

SOURCE_ARGUMENT = Annotated[
    Path,
    typer.Argument(help="Component source as it was before preprocessing."),
]
SCRIPT_PREPROCESSOR_OPTION = Annotated[
    list[str] | None,
    typer.Option("--script-preprocessor", help="Name of a configured script preprocessor (repeatable)."),
]
STYLE_PREPROCESSOR_OPTION = Annotated[
    list[str] | None,
    typer.Option("--style-preprocessor", help="Name of a configured style preprocessor (repeatable)."),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Print the enhanced diagnostic as JSON."),
]


def build_descriptors(
    script_names: Sequence[str] | None,
    style_names: Sequence[str] | None,
) -> list[PreprocessorDescriptor]:
    """Describe the preprocessors named on the command line as hook-bearing descriptors."""

    descriptors = [PreprocessorDescriptor(name=name, script=True) for name in script_names or ()]
    descriptors.extend(PreprocessorDescriptor(name=name, style=True) for name in style_names or ())
    return descriptors


def enhance_command(
    diagnostic_path: DIAGNOSTIC_ARGUMENT,
    source_path: SOURCE_ARGUMENT,
    script_preprocessors: SCRIPT_PREPROCESSOR_OPTION = None,
    style_preprocessors: STYLE_PREPROCESSOR_OPTION = None,
    as_json: JSON_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Append lang attribute and preprocessor hints to a compiler error."""

    if debug or debug_requested():
        enable_debug_logging()
    try:
        diagnostic = load_diagnostic(diagnostic_path)
        source = read_text(source_path)
    except CLIError as exc:
        exit_with_error(exc)

    enhance_compile_error(diagnostic, source, build_descriptors(script_preprocessors, style_preprocessors))
    typer.echo(dumps(diagnostic) if as_json else build_extended_log_message(diagnostic))


__all__ = ["build_descriptors", "enhance_command"]
