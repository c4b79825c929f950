"""Data models for rule fixture extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Tag:
    """One annotation from a leading doc comment."""

    type: str  # "module" | "fileoverview" | "example" | ...
    string: str  # Raw text following the @type marker


@dataclass(frozen=True)
class TestCase:
    """One fixture entry within a context."""

    __test__ = False  # Not a pytest class

    setting: str  # Canonical setting key, same as the containing context
    config: Any = field(default_factory=dict)  # Any JSON value, {} when not given
    input: str | None = None  # None until an input is given
    output: list[str] = field(default_factory=list)  # [] means no messages


# name -> case, in first-encounter order
Context = dict[str, TestCase]

# setting key -> context, in first-encounter order
FixtureTable = dict[str, Context]


@dataclass(frozen=True)
class RuleRecord:
    """Extraction result for one rule."""

    rule_id: str  # "no-empty", equal to the @module tag
    description: str  # From @fileoverview, de-indented and trimmed
    file_path: str  # Rule directory as given by the caller
    tests: FixtureTable = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Results from fixture validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed


@dataclass
class ExtractionResult:
    """Results from extracting a batch of rules."""

    rules: list[RuleRecord] = field(default_factory=list)
    failures: dict[str, str] = field(default_factory=dict)  # rule path -> error
