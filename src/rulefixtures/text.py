"""Whitespace helpers for doc comment text."""

from __future__ import annotations

import re

_INDENT = re.compile(r"^[ \t]*(?=\S)", re.MULTILINE)


def strip_indent(text: str) -> str:
    """Remove the indentation shared by all non-blank lines.

    Blank lines are left alone and the result is not trimmed, so leading and
    trailing blank lines survive.
    """
    indents = [len(m.group(0)) for m in _INDENT.finditer(text)]
    if not indents:
        return text
    min_indent = min(indents)
    if min_indent == 0:
        return text
    return re.sub(rf"^[ \t]{{{min_indent}}}", "", text, flags=re.MULTILINE)


def trim(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def strip_blank_lines(text: str) -> str:
    """Drop leading and trailing whitespace-only lines, keeping indentation."""
    lines = text.split("\n")
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)
