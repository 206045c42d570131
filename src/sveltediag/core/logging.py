# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console and debug logging helpers for diagnostics and CLI failures."""

from __future__ import annotations

import logging
import sys

from rich.text import Text

from .console import detect_tty, get_console_manager
from .models import CompileDiagnostic

PACKAGE_LOGGER = logging.getLogger("sveltediag")


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message on the console.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(f"{'❌ ' if use_emoji else ''}{msg}")
    if color_enabled:
        text.stylize("red")
    console.print(text)


def build_extended_log_message(diagnostic: CompileDiagnostic) -> str:
    """Prefix the diagnostic message with ``filename:line:column`` when known.

    Terminals and editors turn the prefix into a clickable location.

    Args:
        diagnostic: Compiler diagnostic to render.

    Returns:
        str: Message prefixed by whatever location details are available.
    """

    parts: list[str] = []
    if diagnostic.filename:
        parts.append(diagnostic.filename)
    if diagnostic.start is not None:
        parts.append(f":{diagnostic.start.line}:{diagnostic.start.column}")
    if diagnostic.message:
        if parts:
            parts.append(" ")
        parts.append(diagnostic.message)
    return "".join(parts)


def enable_debug_logging() -> None:
    """Stream package debug records to stderr; repeated calls are no-ops."""

    if getattr(PACKAGE_LOGGER, "_sveltediag_verbose_configured", False):
        return
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    PACKAGE_LOGGER.addHandler(handler)
    PACKAGE_LOGGER.setLevel(logging.DEBUG)
    PACKAGE_LOGGER.propagate = False
    setattr(PACKAGE_LOGGER, "_sveltediag_verbose_configured", True)


__all__ = ["PACKAGE_LOGGER", "build_extended_log_message", "enable_debug_logging", "fail"]
