# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate and enhance component compiler diagnostics for bundler consumers."""

from __future__ import annotations

from importlib import metadata

from .core.models import (
    CompileDiagnostic,
    ESBuildMessage,
    PreprocessorDescriptor,
    ResolvedOptions,
    RollupError,
)
from .diagnostics import (
    enhance_compile_error,
    format_frame_for_vite,
    line_from_frame,
    to_esbuild_error,
    to_rollup_error,
)

__all__ = [
    "CompileDiagnostic",
    "ESBuildMessage",
    "PreprocessorDescriptor",
    "ResolvedOptions",
    "RollupError",
    "__version__",
    "enhance_compile_error",
    "format_frame_for_vite",
    "line_from_frame",
    "to_esbuild_error",
    "to_rollup_error",
]

try:
    __version__ = metadata.version("sveltediag")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
