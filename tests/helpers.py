"""Helpers for building rule sources in tests."""

from __future__ import annotations

import json
from pathlib import Path


def doc_comment(
    module: str | None = None,
    fileoverview: str | None = None,
    examples: list[tuple[dict | str, str]] | None = None,
) -> str:
    """Render a rule's index.js with a JSDoc leading comment.

    Each example is (header, body). A dict header is JSON encoded; a string
    header is written as is so tests can break it.
    """
    lines = ["/**", " * @author Jane Doe", " * @license MIT"]
    if module is not None:
        lines.append(f" * @module {module}")
    if fileoverview is not None:
        lines.append(" * @fileoverview")
        for line in fileoverview.split("\n"):
            lines.append(f" *   {line}".rstrip())
    for header, body in examples or []:
        if isinstance(header, dict):
            header = json.dumps(header)
        lines.append(f" * @example {header}")
        lines.append(" *")
        for line in body.split("\n"):
            lines.append(f" *   {line}".rstrip())
        lines.append(" *")
    lines.extend([" */", "", "'use strict';", "", "module.exports = rule;", ""])
    return "\n".join(lines)


def write_rule(packages: Path, rule_id: str, source: str, prefix: str = "remark-lint-") -> Path:
    """Create `<packages>/<prefix><rule_id>/index.js` and return the directory."""
    rule_dir = packages / f"{prefix}{rule_id}"
    rule_dir.mkdir(parents=True)
    (rule_dir / "index.js").write_text(source, encoding="utf-8")
    return rule_dir
