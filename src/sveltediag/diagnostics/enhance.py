# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Append configuration hints to compiler errors caused by missing preprocessing.

The scans below are shallow tag-boundary heuristics over the original,
unprocessed component source, not a parser. Nested or malformed markup is not
special-cased. Every matching block contributes its own hints, and identical
hints are kept.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

from ..core.models import CompileDiagnostic, PreprocessorDescriptor

LOGGER = logging.getLogger(__name__)

PARSE_ERROR_CODE: Final[str] = "parse-error"
CSS_SYNTAX_ERROR_CODE: Final[str] = "css-syntax-error"
PREPROCESS_DOCS_URL: Final[str] = "https://github.com/sveltejs/vite-plugin-svelte/blob/main/docs/preprocess.md"
# Style-only preprocessor added by the scoping helper; it does not compile any style language.
SCOPE_EVERYTHING_PREPROCESSOR: Final[str] = "inject-scope-everything-rule"

_SCRIPT_RE: Final[re.Pattern[str]] = re.compile(
    r"<script(\s.*?)?(?:>(.*?)</script>|/>)",
    re.IGNORECASE | re.DOTALL,
)
_STYLE_RE: Final[re.Pattern[str]] = re.compile(
    r"<style(\s.*?)?(?:>(.*?)</style>|/>)",
    re.IGNORECASE | re.DOTALL,
)
_LANG_VALUE_RE: Final[re.Pattern[str]] = re.compile(r'lang="(.+?)"')
_LANG_TS_MARKER: Final[str] = 'lang="ts"'
_LANG_MARKER: Final[str] = "lang="
_HINT_JOINER: Final[str] = "\n- "

MISSING_LANG_TS_HINT: Final[str] = 'Did you forget to add lang="ts" to your script tag?'
MISSING_STYLE_LANG_HINT: Final[str] = "Did you forget to add a lang attribute to your style tag?"

PreprocessorEntry: TypeAlias = PreprocessorDescriptor | Mapping[str, object] | object
PreprocessorInput: TypeAlias = PreprocessorEntry | Sequence[PreprocessorEntry] | None


def missing_preprocessor_hint(preprocessor_type: str) -> str:
    """Return the hint pointing users at the preprocessing documentation."""
    return (
        f"Did you forget to add a {preprocessor_type} preprocessor? "
        f"See {PREPROCESS_DOCS_URL} for more information."
    )


def arraify(preprocessors: PreprocessorInput) -> list[PreprocessorDescriptor]:
    """Normalise a single descriptor, a sequence of them or ``None`` into a list.

    Mapping entries and host objects exposing ``name``/``script``/``style``
    attributes are validated into :class:`PreprocessorDescriptor` instances.

    Args:
        preprocessors: Preprocessor configuration as supplied by the host.

    Returns:
        list[PreprocessorDescriptor]: Ordered descriptors, empty when none were supplied.
    """

    if preprocessors is None:
        return []
    if isinstance(preprocessors, Sequence) and not isinstance(preprocessors, str):
        items: Sequence[PreprocessorEntry] = preprocessors
    else:
        items = [preprocessors]
    return [
        item if isinstance(item, PreprocessorDescriptor) else PreprocessorDescriptor.model_validate(item)
        for item in items
    ]


def _script_hints(
    original_code: str,
    error_index: int,
    preprocessors: Sequence[PreprocessorDescriptor],
) -> list[str]:
    """Collect hints for script blocks that contain ``error_index``."""

    hints: list[str] = []
    no_script_preprocessor = all(not descriptor.has_script for descriptor in preprocessors)
    for match in _SCRIPT_RE.finditer(original_code):
        if not match.start() <= error_index <= match.end():
            continue
        attributes = match.group(1) or ""
        has_lang_ts = _LANG_TS_MARKER in attributes
        if not has_lang_ts:
            hints.append(MISSING_LANG_TS_HINT)
        if no_script_preprocessor:
            hints.append(missing_preprocessor_hint("TypeScript" if has_lang_ts else "script"))
    return hints


def _style_hints(original_code: str, preprocessors: Sequence[PreprocessorDescriptor]) -> list[str]:
    """Collect hints for every style block; the error offset is not consulted."""

    hints: list[str] = []
    no_style_preprocessor = all(
        not descriptor.has_style or descriptor.name == SCOPE_EVERYTHING_PREPROCESSOR
        for descriptor in preprocessors
    )
    for match in _STYLE_RE.finditer(original_code):
        attributes = match.group(1) or ""
        if _LANG_MARKER not in attributes:
            hints.append(MISSING_STYLE_LANG_HINT)
        if no_style_preprocessor:
            lang = _LANG_VALUE_RE.search(attributes)
            hints.append(missing_preprocessor_hint(lang.group(1) if lang else "style"))
    return hints


def enhance_compile_error(
    diagnostic: CompileDiagnostic,
    original_code: str,
    preprocessors: PreprocessorInput = None,
) -> CompileDiagnostic:
    """Append hints about missing ``lang`` attributes or preprocessors to ``diagnostic``.

    The message is extended in place and the same object is returned. Calling
    this twice on one diagnostic appends the hints twice; callers enhance each
    diagnostic once.

    Args:
        diagnostic: Compiler error to enhance.
        original_code: Component source as it was before preprocessing.
        preprocessors: Preprocessor descriptor(s) configured by the host.

    Returns:
        CompileDiagnostic: ``diagnostic`` itself, possibly with a longer message.
    """

    descriptors = arraify(preprocessors)
    hints: list[str] = []
    if diagnostic.code == PARSE_ERROR_CODE:
        error_index = diagnostic.pos if diagnostic.pos is not None else -1
        hints.extend(_script_hints(original_code, error_index, descriptors))
    elif diagnostic.code == CSS_SYNTAX_ERROR_CODE:
        hints.extend(_style_hints(original_code, descriptors))

    if hints:
        LOGGER.debug("adding %d hint(s) to %s error in %s", len(hints), diagnostic.code, diagnostic.filename)
        diagnostic.message += "\n\n- " + _HINT_JOINER.join(hints)
    return diagnostic


__all__ = [
    "CSS_SYNTAX_ERROR_CODE",
    "MISSING_LANG_TS_HINT",
    "MISSING_STYLE_LANG_HINT",
    "PARSE_ERROR_CODE",
    "PREPROCESS_DOCS_URL",
    "SCOPE_EVERYTHING_PREPROCESSOR",
    "arraify",
    "enhance_compile_error",
    "missing_preprocessor_hint",
]
