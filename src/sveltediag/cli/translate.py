# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""``translate`` command: print a diagnostic in a bundler consumer's shape."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated

import typer

from ..core.serialization import dumps
from ..diagnostics.translate import to_esbuild_error, to_rollup_error
from .shared import (
    DEBUG_OPTION,
    DIAGNOSTIC_ARGUMENT,
    CLIError,
    exit_with_error,
    load_diagnostic,
    resolve_cli_options,
)


class TranslationTarget(StrEnum):
    """Consumers a diagnostic can be translated for."""

    ROLLUP = "rollup"
    ESBUILD = "esbuild"


TARGET_OPTION = Annotated[
    TranslationTarget,
    typer.Option("--target", "-t", case_sensitive=False, help="Consumer shape to produce."),
]
BUILD_OPTION = Annotated[
    bool,
    typer.Option("--build", help="Treat the diagnostic as a production build error."),
]


def translate_command(
    diagnostic_path: DIAGNOSTIC_ARGUMENT,
    target: TARGET_OPTION = TranslationTarget.ROLLUP,
    build: BUILD_OPTION = False,
    debug: DEBUG_OPTION = False,
) -> None:
    """Translate a compiler diagnostic for the bundler or the pre-bundler."""

    try:
        options = resolve_cli_options(build=build, debug=debug)
        diagnostic = load_diagnostic(diagnostic_path)
    except CLIError as exc:
        exit_with_error(exc)

    if target is TranslationTarget.ESBUILD:
        translated = to_esbuild_error(diagnostic, options)
    else:
        translated = to_rollup_error(diagnostic, options)
    typer.echo(dumps(translated))


__all__ = ["TranslationTarget", "translate_command"]
