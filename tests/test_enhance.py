# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for preprocessing hints appended to compiler errors."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

from sveltediag.core.models import CompileDiagnostic, PreprocessorDescriptor
from sveltediag.diagnostics.enhance import (
    CSS_SYNTAX_ERROR_CODE,
    MISSING_LANG_TS_HINT,
    MISSING_STYLE_LANG_HINT,
    PARSE_ERROR_CODE,
    SCOPE_EVERYTHING_PREPROCESSOR,
    arraify,
    enhance_compile_error,
    missing_preprocessor_hint,
)

SCRIPT_SOURCE = "<script>let x: number = 1</script>\n<h1>hi</h1>"


def _parse_error(pos: int | None) -> CompileDiagnostic:
    return CompileDiagnostic(message="Unexpected token", code=PARSE_ERROR_CODE, pos=pos)


def _css_error() -> CompileDiagnostic:
    return CompileDiagnostic(message="Identifier is expected", code=CSS_SYNTAX_ERROR_CODE, pos=0)


def test_parse_error_in_plain_script_gets_both_hints() -> None:
    diagnostic = _parse_error(SCRIPT_SOURCE.index(":"))

    result = enhance_compile_error(diagnostic, SCRIPT_SOURCE)

    assert result is diagnostic
    assert diagnostic.message == (
        "Unexpected token\n\n- "
        + MISSING_LANG_TS_HINT
        + "\n- "
        + missing_preprocessor_hint("script")
    )


def test_parse_error_with_lang_ts_suggests_typescript_preprocessor() -> None:
    source = '<script lang="ts">let x: number = 1</script>'
    diagnostic = _parse_error(source.index(":"))

    enhance_compile_error(diagnostic, source, [])

    assert diagnostic.message == "Unexpected token\n\n- " + missing_preprocessor_hint("TypeScript")
    assert "TypeScript preprocessor?" in diagnostic.message


def test_parse_error_with_script_preprocessor_only_flags_lang() -> None:
    diagnostic = _parse_error(SCRIPT_SOURCE.index(":"))
    preprocessor = PreprocessorDescriptor(name="typescript", script=lambda **_: None)

    enhance_compile_error(diagnostic, SCRIPT_SOURCE, preprocessor)

    assert diagnostic.message == "Unexpected token\n\n- " + MISSING_LANG_TS_HINT


def test_parse_error_outside_script_is_untouched() -> None:
    diagnostic = _parse_error(SCRIPT_SOURCE.index("<h1>") + 2)

    enhance_compile_error(diagnostic, SCRIPT_SOURCE)

    assert diagnostic.message == "Unexpected token"


def test_parse_error_without_position_is_untouched() -> None:
    diagnostic = _parse_error(None)

    enhance_compile_error(diagnostic, SCRIPT_SOURCE)

    assert diagnostic.message == "Unexpected token"


def test_script_containment_includes_both_boundaries() -> None:
    block = "<script>let x: number = 1</script>"
    source = block + "\n<p/>"
    start_diag = _parse_error(0)
    end_diag = _parse_error(len(block))
    after_diag = _parse_error(len(block) + 1)

    for diagnostic in (start_diag, end_diag, after_diag):
        enhance_compile_error(diagnostic, source)

    assert MISSING_LANG_TS_HINT in start_diag.message
    assert MISSING_LANG_TS_HINT in end_diag.message
    assert after_diag.message == "Unexpected token"


def test_self_closing_script_tag_is_scanned() -> None:
    source = '<script lang="ts" src="./main.ts" />'
    diagnostic = _parse_error(3)

    enhance_compile_error(diagnostic, source)

    assert diagnostic.message == "Unexpected token\n\n- " + missing_preprocessor_hint("TypeScript")


def test_script_tag_match_is_case_insensitive() -> None:
    source = "<SCRIPT>let x: number</SCRIPT>"
    diagnostic = _parse_error(10)

    enhance_compile_error(diagnostic, source)

    assert MISSING_LANG_TS_HINT in diagnostic.message


def test_css_error_without_lang_gets_both_hints() -> None:
    diagnostic = _css_error()

    enhance_compile_error(diagnostic, "<style>.a { .b {} }</style>")

    assert diagnostic.message == (
        "Identifier is expected\n\n- "
        + MISSING_STYLE_LANG_HINT
        + "\n- "
        + missing_preprocessor_hint("style")
    )


def test_css_error_names_missing_lang_preprocessor() -> None:
    diagnostic = _css_error()

    enhance_compile_error(diagnostic, '<style lang="scss">.a{}</style>')

    assert diagnostic.message == "Identifier is expected\n\n- " + missing_preprocessor_hint("scss")


def test_css_error_with_style_preprocessor_is_untouched() -> None:
    diagnostic = _css_error()
    preprocessors = [
        PreprocessorDescriptor(name="typescript", script=lambda **_: None),
        PreprocessorDescriptor(name="sass", style=lambda **_: None),
    ]

    enhance_compile_error(diagnostic, '<style lang="scss">.a{}</style>', preprocessors)

    assert diagnostic.message == "Identifier is expected"


def test_css_error_ignores_scope_everything_preprocessor() -> None:
    diagnostic = _css_error()
    preprocessor = PreprocessorDescriptor(name=SCOPE_EVERYTHING_PREPROCESSOR, style=lambda **_: None)

    enhance_compile_error(diagnostic, '<style lang="less">.a{}</style>', preprocessor)

    assert diagnostic.message == "Identifier is expected\n\n- " + missing_preprocessor_hint("less")


def test_css_error_scans_every_style_block_regardless_of_position() -> None:
    source = "<style>.a{}</style>\n<div/>\n<style>.b{}</style>"
    diagnostic = CompileDiagnostic(message="bad", code=CSS_SYNTAX_ERROR_CODE, pos=len(source) + 100)

    enhance_compile_error(diagnostic, source)

    # identical hints from both blocks are kept
    assert diagnostic.message.count(MISSING_STYLE_LANG_HINT) == 2
    assert diagnostic.message.count(missing_preprocessor_hint("style")) == 2


def test_other_codes_are_untouched() -> None:
    diagnostic = CompileDiagnostic(message="unused export", code="unused-export-let", pos=3)
    missing_code = CompileDiagnostic(message="boom", pos=3)

    enhance_compile_error(diagnostic, SCRIPT_SOURCE)
    enhance_compile_error(missing_code, "<style>.a{}</style>")

    assert diagnostic.message == "unused export"
    assert missing_code.message == "boom"


def test_enhancing_twice_appends_hints_twice() -> None:
    diagnostic = _parse_error(SCRIPT_SOURCE.index(":"))

    enhance_compile_error(diagnostic, SCRIPT_SOURCE)
    once = diagnostic.message
    enhance_compile_error(diagnostic, SCRIPT_SOURCE)

    # callers are responsible for enhancing a diagnostic only once
    assert diagnostic.message.startswith(once)
    assert diagnostic.message.count(MISSING_LANG_TS_HINT) == 2


def test_arraify_normalises_preprocessor_inputs() -> None:
    descriptor = PreprocessorDescriptor(name="sass", style=True)

    assert arraify(None) == []
    assert arraify([]) == []
    assert arraify(descriptor) == [descriptor]
    assert arraify((descriptor, descriptor)) == [descriptor, descriptor]
    normalised = arraify({"name": "ts", "script": True})
    assert len(normalised) == 1
    assert normalised[0].name == "ts"
    assert normalised[0].has_script
    assert not normalised[0].has_style


@dataclass
class _HostPreprocessorGroup:
    name: str
    script: object = None
    style: object = None


def test_attribute_descriptors_suppress_style_hints() -> None:
    diagnostic = _css_error()
    preprocessors = [SimpleNamespace(name="sass", style=lambda **_: None, script=None)]

    enhance_compile_error(diagnostic, '<style lang="scss">.a{}</style>', preprocessors)

    assert diagnostic.message == "Identifier is expected"


def test_single_dataclass_descriptor_is_normalised() -> None:
    group = _HostPreprocessorGroup(name="typescript", script=lambda **_: None)

    normalised = arraify(group)

    assert len(normalised) == 1
    assert normalised[0].name == "typescript"
    assert normalised[0].has_script
    assert not normalised[0].has_style
