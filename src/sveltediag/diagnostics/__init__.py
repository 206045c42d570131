# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic translation and enhancement helpers."""

from __future__ import annotations

from .enhance import (
    CSS_SYNTAX_ERROR_CODE,
    PARSE_ERROR_CODE,
    arraify,
    enhance_compile_error,
)
from .frame import format_frame_for_vite, line_from_frame
from .translate import should_include_stack, to_esbuild_error, to_rollup_error

__all__ = [
    "CSS_SYNTAX_ERROR_CODE",
    "PARSE_ERROR_CODE",
    "arraify",
    "enhance_compile_error",
    "format_frame_for_vite",
    "line_from_frame",
    "should_include_stack",
    "to_esbuild_error",
    "to_rollup_error",
]
