"""Exceptions raised while extracting rule fixtures.

Every error is an authoring defect in a rule's doc comment (or a missing
file), so none of them are retried. Callers can catch ``RuleDocError`` to
handle them all.
"""

from __future__ import annotations


class RuleDocError(Exception):
    """Base exception for rule documentation problems."""

    def __init__(self, message: str, rule_id: str | None = None):
        super().__init__(message)
        self.rule_id = rule_id


class InvalidRulePathError(RuleDocError):
    """Raised when a rule directory name lacks the expected prefix."""

    def __init__(self, rule_path: str, prefix: str):
        super().__init__(
            f"{rule_path} is not a rule directory: name must start with `{prefix}`"
        )
        self.rule_path = rule_path
        self.prefix = prefix


class RuleSourceError(RuleDocError):
    """Raised when the rule's entry module cannot be read."""

    pass


class InvalidModuleError(RuleDocError):
    """Raised when the @module tag does not match the rule id."""

    def __init__(self, rule_id: str, module: str | None):
        super().__init__(f"{rule_id} has an invalid `@module`: {module}", rule_id)
        self.module = module


class MissingDescriptionError(RuleDocError):
    """Raised when a rule has no @fileoverview tag."""

    def __init__(self, rule_id: str):
        super().__init__(f"{rule_id} is missing a `@fileoverview`", rule_id)


class MalformedExampleError(RuleDocError):
    """Raised when the header line of an @example is not a JSON object."""

    def __init__(self, rule_id: str, reason: str):
        super().__init__(f"Could not parse example in {rule_id}:\n{reason}", rule_id)
        self.reason = reason


class InvalidLabelError(RuleDocError):
    """Raised when an @example label is neither `input` nor `output`."""

    def __init__(self, rule_id: str, label: object):
        super().__init__(
            f"Expected `input` or `output` for `label` in {rule_id}, not `{label}`",
            rule_id,
        )
        self.label = label
