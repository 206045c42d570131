# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Core models, console and logging primitives."""

from __future__ import annotations

from .models import (
    CompileDiagnostic,
    DiagnosticPayloadError,
    ESBuildLocation,
    ESBuildMessage,
    PreprocessorDescriptor,
    ResolvedOptions,
    RollupError,
    RollupLocation,
    SourcePosition,
)

__all__ = [
    "CompileDiagnostic",
    "DiagnosticPayloadError",
    "ESBuildLocation",
    "ESBuildMessage",
    "PreprocessorDescriptor",
    "ResolvedOptions",
    "RollupError",
    "RollupLocation",
    "SourcePosition",
]
