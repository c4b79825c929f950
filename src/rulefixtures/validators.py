"""Fixture validation and quality checks."""

from __future__ import annotations

from .models import RuleRecord, ValidationResult


def validate_rules(records: list[RuleRecord], strict: bool = False) -> ValidationResult:
    """Validate extracted fixtures.

    Checks:
    1. Rules should have at least one @example (warning in normal mode, error in strict)
    2. Every case needs an input; an `output` patch alone cannot be run (error)
    3. Output made only of empty lines is probably a stray label (warning)

    Args:
        records: Extracted rules
        strict: If True, rules without examples are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    for record in records:
        if not record.tests:
            msg = f"{record.rule_id}: no @example fixtures"
            if strict:
                result.errors.append(msg)
            else:
                result.warnings.append(msg)
            continue

        for setting, context in record.tests.items():
            for name, case in context.items():
                where = f"{record.rule_id} [{setting}] {name}"
                if case.input is None:
                    result.errors.append(f"{where}: has output but no input")
                elif case.output and not any(line.strip() for line in case.output):
                    result.warnings.append(f"{where}: output is empty")

    return result


def compute_coverage(records: list[RuleRecord]) -> float:
    """Fraction of rules with at least one fixture (0.0 - 1.0)."""
    if not records:
        return 1.0
    return sum(1 for r in records if r.tests) / len(records)
