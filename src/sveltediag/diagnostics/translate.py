# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate compiler diagnostics into the shapes expected by bundler consumers."""

from __future__ import annotations

import logging

from ..core.models import (
    CompileDiagnostic,
    ESBuildLocation,
    ESBuildMessage,
    ResolvedOptions,
    RollupError,
    RollupLocation,
)
from .frame import format_frame_for_vite, line_from_frame

LOGGER = logging.getLogger(__name__)


def should_include_stack(diagnostic: CompileDiagnostic, options: ResolvedOptions) -> bool:
    """Return ``True`` when the native stack trace should accompany ``diagnostic``.

    Stacks are kept for builds and debug sessions, and whenever no code frame
    exists to locate the problem.

    Args:
        diagnostic: Compiler diagnostic being translated.
        options: Resolved plugin options.

    Returns:
        bool: Whether the stack belongs in the translated output.
    """

    return options.is_build or options.is_debug or not diagnostic.frame


def to_rollup_error(diagnostic: CompileDiagnostic, options: ResolvedOptions) -> RollupError:
    """Convert ``diagnostic`` into the build-pipeline error shape.

    Args:
        diagnostic: Compiler diagnostic to convert; it is not modified.
        options: Resolved plugin options driving the stack policy.

    Returns:
        RollupError: Error the bundler and its overlay can display.
    """

    include_stack = should_include_stack(diagnostic, options)
    LOGGER.debug("rollup error for %s: include_stack=%s", diagnostic.filename, include_stack)
    loc = None
    if diagnostic.start is not None:
        loc = RollupLocation(
            line=diagnostic.start.line,
            column=diagnostic.start.column,
            file=diagnostic.filename,
        )
    return RollupError(
        # name is required or downstream error coalescing turns the error into a string
        name=diagnostic.name,
        id=diagnostic.filename,
        message=diagnostic.message,
        frame=format_frame_for_vite(diagnostic.frame),
        code=diagnostic.code,
        stack=(diagnostic.stack or "") if include_stack else "",
        loc=loc,
    )


def to_esbuild_error(diagnostic: CompileDiagnostic, options: ResolvedOptions) -> ESBuildMessage:
    """Convert ``diagnostic`` into the dependency pre-bundler's partial message.

    Args:
        diagnostic: Compiler diagnostic to convert; it is not modified.
        options: Resolved plugin options driving the stack policy.

    Returns:
        ESBuildMessage: Message with optional location and detail.
    """

    location = None
    if diagnostic.start is not None:
        location = ESBuildLocation(
            line=diagnostic.start.line,
            column=diagnostic.start.column,
            file=diagnostic.filename,
            # the CLI prints nothing useful without the offending line
            line_text=line_from_frame(diagnostic.start.line, diagnostic.frame),
        )
    detail = diagnostic.stack if should_include_stack(diagnostic, options) else None
    return ESBuildMessage(text=diagnostic.message, location=location, detail=detail)


__all__ = ["should_include_stack", "to_esbuild_error", "to_rollup_error"]
