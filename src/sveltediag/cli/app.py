# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the diagnostic commands."""

from __future__ import annotations

import typer

from .enhance import enhance_command
from .translate import translate_command

app = typer.Typer(
    help="Translate and enhance component compiler diagnostics.",
    no_args_is_help=True,
    add_completion=False,
)
app.command("translate")(translate_command)
app.command("enhance")(enhance_command)


def main() -> None:
    """Run the ``sveltediag`` command line interface."""

    app()


__all__ = ["app", "main"]
