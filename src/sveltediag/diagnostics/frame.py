# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for reading and reformatting compiler code frames.

The compiler renders frames with colon separated line numbers::

    1: foo
    2: bar;
          ^
    3: baz

while the dev-server overlay expects pipe separated numbers with an extra
column of padding::

     1 | foo
     2 | bar;
             ^
     3 | baz
"""

from __future__ import annotations

import re
from typing import Final

_CARET_LINE: Final[re.Pattern[str]] = re.compile(r"^\s+\^")
_LINE_SEPARATOR: Final[str] = ": "
_CARET_INDENT: Final[str] = "   "


def format_frame_for_vite(frame: str | None) -> str:
    """Return ``frame`` rewritten to the overlay's pipe separated layout.

    Args:
        frame: Compiler code frame, or ``None`` when the diagnostic has none.

    Returns:
        str: Reformatted frame; empty when ``frame`` is empty or missing.
    """

    if not frame:
        return ""
    return "\n".join(
        _CARET_INDENT + line if _CARET_LINE.match(line) else " " + line.replace(":", " | ", 1)
        for line in frame.split("\n")
    )


def line_from_frame(line_no: int, frame: str | None) -> str:
    """Return the source text of ``line_no`` as shown in ``frame``.

    Args:
        line_no: 1-based line number to look up.
        frame: Compiler code frame, or ``None`` when the diagnostic has none.

    Returns:
        str: Text following the ``"<line_no>: "`` prefix, or ``""`` when absent.
    """

    if not frame:
        return ""
    prefix = f"{line_no}{_LINE_SEPARATOR}"
    for line in frame.split("\n"):
        if line.lstrip().startswith(prefix):
            return line[line.index(_LINE_SEPARATOR) + len(_LINE_SEPARATOR) :]
    return ""


__all__ = ["format_frame_for_vite", "line_from_frame"]
