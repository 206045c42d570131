# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from sveltediag.core.models import CompileDiagnostic, SourcePosition

SAMPLE_FRAME = "1: foo\n2: bar;\n      ^\n3: baz"


@pytest.fixture
def sample_frame() -> str:
    """Return a compiler code frame with a caret marker under line 2."""
    return SAMPLE_FRAME


@pytest.fixture
def framed_diagnostic() -> CompileDiagnostic:
    """Return a parse error positioned on line 2 with a caret frame and stack."""
    return CompileDiagnostic(
        name="ParseError",
        code="parse-error",
        message="Unexpected token",
        filename="src/App.svelte",
        frame=SAMPLE_FRAME,
        start=SourcePosition(line=2, column=4),
        pos=12,
        stack="ParseError: Unexpected token\n    at parse (compiler.js:1:1)",
    )
