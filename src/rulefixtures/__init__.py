"""rulefixtures - Test fixtures from lint rule doc comments."""

from rulefixtures.errors import (
    InvalidLabelError,
    InvalidModuleError,
    InvalidRulePathError,
    MalformedExampleError,
    MissingDescriptionError,
    RuleDocError,
    RuleSourceError,
)
from rulefixtures.extractors import extract_rule, extract_rules, find_rules
from rulefixtures.models import RuleRecord, Tag, TestCase

__all__ = [
    "extract_rule",
    "extract_rules",
    "find_rules",
    "RuleRecord",
    "Tag",
    "TestCase",
    "RuleDocError",
    "InvalidRulePathError",
    "RuleSourceError",
    "InvalidModuleError",
    "MissingDescriptionError",
    "MalformedExampleError",
    "InvalidLabelError",
]
