"""Tokenizer for JSDoc-style leading comments in rule sources."""

from __future__ import annotations

import re

from .models import Tag
from .text import strip_blank_lines

_DOC_BLOCK = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
_GUTTER = re.compile(r"^[ \t]*\* ?")
_TAG_LINE = re.compile(r"^@(\w+)(?:[ \t]+(.*))?$")


def _strip_gutter(block: str) -> list[str]:
    """Remove the leading ` * ` from every line of a comment body."""
    lines = block.split("\n")
    # Text on the opening `/**` line has no gutter
    return [lines[0].strip()] + [_GUTTER.sub("", line, count=1) for line in lines[1:]]


def parse_leading_comment(source: str) -> list[Tag]:
    """Parse the first `/** ... */` block of `source` into tags.

    A tag starts on a line beginning with `@name` and runs until the next tag
    line or the end of the block. Its string is the rest of the tag line plus
    the following lines, without surrounding blank lines. Text before the
    first tag is the free-form description of the block and is not returned.
    """
    match = _DOC_BLOCK.search(source)
    if not match:
        return []

    tags: list[Tag] = []
    current_type: str | None = None
    current_lines: list[str] = []

    def flush() -> None:
        if current_type is not None:
            text = strip_blank_lines("\n".join(current_lines)).rstrip()
            tags.append(Tag(type=current_type, string=text))

    for line in _strip_gutter(match.group(1)):
        tag_match = _TAG_LINE.match(line)
        if tag_match:
            flush()
            current_type = tag_match.group(1)
            current_lines = [tag_match.group(2) or ""]
        elif current_type is not None:
            current_lines.append(line)

    flush()
    return tags
