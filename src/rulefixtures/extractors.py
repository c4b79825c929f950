"""Fixture extraction from the leading doc comment of a lint rule."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Iterable, Literal

from pydantic import ValidationError

from .comments import parse_leading_comment
from .config import ExtractorConfig
from .errors import (
    InvalidLabelError,
    InvalidModuleError,
    InvalidRulePathError,
    MalformedExampleError,
    MissingDescriptionError,
    RuleDocError,
    RuleSourceError,
)
from .models import Context, ExtractionResult, FixtureTable, RuleRecord, Tag, TestCase
from .schemas import ExampleHeader
from .tags import find_all, find_first
from .text import strip_blank_lines, strip_indent, trim

log = logging.getLogger(__name__)

SourceReader = Callable[[Path], str]
CommentParser = Callable[[str], list[Tag]]

_LABELS = ("input", "output")


def _js_value(value: Any) -> Any:
    """Turn integral floats into ints, since JavaScript numbers make no such split."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, list):
        return [_js_value(v) for v in value]
    if isinstance(value, dict):
        return {k: _js_value(v) for k, v in value.items()}
    return value


def _is_falsy(value: Any) -> bool:
    """JavaScript falsiness for JSON values: null, false, 0 and ""."""
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0


def _render(value: Any) -> str:
    """Render a value the way JSON.stringify does (compact, key order kept)."""
    return json.dumps(_js_value(value), separators=(",", ":"), ensure_ascii=False)


def setting_key(setting: Any) -> str:
    """Canonical context key for an example's `setting`.

    A missing or falsy setting (`null`, `false`, `0`, `""`) means `true`.
    """
    return _render(True if _is_falsy(setting) else setting)


def _property_key(name: Any) -> str:
    """String JavaScript uses when `name` indexes an object."""
    if isinstance(name, bool):
        return "true" if name else "false"
    if isinstance(name, float) and name.is_integer():
        return str(int(name))
    if isinstance(name, list):
        return ",".join("" if v is None else _property_key(v) for v in name)
    if isinstance(name, dict):
        return "[object Object]"
    return str(name)


def _slot(context: Context, name: Any) -> str:
    """Key for `name` within a context; unnamed cases take the next free index."""
    if name is not None:
        return _property_key(name)
    index = len(context)
    while str(index) in context:
        index += 1
    return str(index)


@dataclass(frozen=True)
class CompleteCase:
    """An unlabeled example: defines the whole case and replaces any existing one."""

    name: Any
    setting: str
    config: Any
    body: str

    def apply(self, context: Context) -> None:
        context[_slot(context, self.name)] = TestCase(
            setting=self.setting,
            config=self.config,
            input=self.body,
            output=[],
        )


@dataclass(frozen=True)
class PatchCase:
    """A labeled example: sets `setting` and one half of a case.

    The case is created on first use with the header's config. Later patches
    never touch `config`.
    """

    name: Any
    setting: str
    config: Any
    label: Literal["input", "output"]
    body: str

    def apply(self, context: Context) -> None:
        key = _slot(context, self.name)
        case = context.get(key)
        if case is None:
            case = TestCase(setting=self.setting, config=self.config)

        if self.label == "output":
            case = replace(case, setting=self.setting, output=self.body.split("\n"))
        else:
            case = replace(case, setting=self.setting, input=self.body)

        context[key] = case


CaseOperation = CompleteCase | PatchCase


def parse_example(rule_id: str, example: str) -> CaseOperation:
    """Turn the raw text of one @example tag into a case operation.

    The body is de-indented and loses its leading and trailing blank lines, so
    the blank line that usually separates the header from the body is not part
    of the fixture. Indentation and blank lines inside the body are kept.
    """
    lines = strip_indent(example).split("\n")
    body = strip_blank_lines(strip_indent("\n".join(lines[1:])))

    try:
        header = ExampleHeader.model_validate_json(lines[0])
    except ValidationError as e:
        raise MalformedExampleError(rule_id, str(e)) from e

    setting = setting_key(header.setting)
    config = {} if header.config is None else header.config

    if header.label is None:
        return CompleteCase(name=header.name, setting=setting, config=config, body=body)

    if header.label not in _LABELS:
        raise InvalidLabelError(rule_id, header.label)

    return PatchCase(
        name=header.name,
        setting=setting,
        config=config,
        label=header.label,
        body=body,
    )


def build_fixture_table(rule_id: str, examples: Iterable[str]) -> FixtureTable:
    """Fold @example tag strings, in order, into a fixture table."""
    tests: FixtureTable = {}
    for example in examples:
        operation = parse_example(rule_id, example)
        context = tests.setdefault(operation.setting, {})
        operation.apply(context)
    return tests


def rule_id_from_path(rule_path: str | Path, prefix: str) -> str:
    """Derive a rule id by stripping `prefix` from the directory name."""
    name = Path(rule_path).name
    if not name.startswith(prefix) or len(name) == len(prefix):
        raise InvalidRulePathError(os.fspath(rule_path), prefix)
    return name[len(prefix) :]


def read_entry_module(rule_path: Path, entry_module: str) -> str:
    """Read the rule's entry module as UTF-8."""
    path = rule_path / entry_module
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuleSourceError(f"Cannot read {path}: {e}") from e


def extract_rule(
    rule_path: str | Path,
    *,
    read_source: SourceReader | None = None,
    parse_comment: CommentParser = parse_leading_comment,
    config: ExtractorConfig | None = None,
) -> RuleRecord:
    """Extract the description and test fixtures of the rule at `rule_path`.

    Args:
        rule_path: Rule directory, e.g. `packages/remark-lint-no-empty`.
        read_source: Returns the entry module text for a rule directory.
            Defaults to reading `config.entry_module` from disk.
        parse_comment: Turns source text into the tags of its leading comment.
        config: Prefix and entry module settings. Defaults to ExtractorConfig().

    Returns:
        RuleRecord with the rule id, description and fixture table.

    Raises:
        RuleDocError: If the path, @module, @fileoverview or an @example is
            invalid, or the entry module cannot be read.
    """
    config = config or ExtractorConfig()
    path = Path(rule_path)
    rule_id = rule_id_from_path(path, config.prefix)

    if read_source is None:
        source = read_entry_module(path, config.entry_module)
    else:
        source = read_source(path)

    tags = parse_comment(source)
    description = find_first(tags, "fileoverview")
    module = find_first(tags, "module")

    if module != rule_id:
        raise InvalidModuleError(rule_id, module)

    if description is None:
        raise MissingDescriptionError(rule_id)

    tests = build_fixture_table(rule_id, find_all(tags, "example"))
    log.debug("Extracted %s: %d setting(s)", rule_id, len(tests))

    return RuleRecord(
        rule_id=rule_id,
        description=trim(strip_indent(description)),
        file_path=os.fspath(rule_path),
        tests=tests,
    )


def find_rules(packages_dir: Path, config: ExtractorConfig | None = None) -> list[Path]:
    """List rule directories under `packages_dir` that have an entry module."""
    config = config or ExtractorConfig()
    return sorted(
        p
        for p in packages_dir.iterdir()
        if p.is_dir()
        and p.name.startswith(config.prefix)
        and p.name != config.prefix
        and (p / config.entry_module).is_file()
    )


def extract_rules(
    rule_paths: Iterable[Path],
    *,
    read_source: SourceReader | None = None,
    parse_comment: CommentParser = parse_leading_comment,
    config: ExtractorConfig | None = None,
) -> ExtractionResult:
    """Extract every rule, collecting failures instead of stopping at the first."""
    result = ExtractionResult()
    for rule_path in rule_paths:
        try:
            record = extract_rule(
                rule_path,
                read_source=read_source,
                parse_comment=parse_comment,
                config=config,
            )
        except RuleDocError as e:
            log.error("Failed to extract %s: %s", rule_path, e)
            result.failures[os.fspath(rule_path)] = str(e)
            continue
        result.rules.append(record)

    result.rules.sort(key=lambda r: r.rule_id)
    return result
