"""Fixture extractor for lint rule packages.

Reads every `remark-lint-*` directory under a packages directory and writes:
    --json PATH      - Fixture tables keyed by rule id
    --markdown PATH  - Rule list with descriptions
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ExtractorConfig
from .extractors import extract_rules, find_rules
from .generators import generate_fixtures_json, generate_rules_markdown
from .validators import compute_coverage, validate_rules


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rulefixtures",
        description="Extract test fixtures from lint rule doc comments.",
    )
    parser.add_argument("packages", type=Path, help="Directory holding rule packages")
    parser.add_argument("--json", type=Path, help="Write fixtures as JSON")
    parser.add_argument("--markdown", type=Path, help="Write the rule list")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat rules without examples as errors",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Extract, validate and write fixtures. Returns the exit code."""
    args = _parse_args(argv)
    config = ExtractorConfig.from_env()

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.packages.is_dir():
        print(f"✗ {args.packages} is not a directory", file=sys.stderr)
        return 1

    print("Extracting rules...")
    result = extract_rules(find_rules(args.packages, config), config=config)

    for record in result.rules:
        cases = sum(len(context) for context in record.tests.values())
        print(f"  ✓ {record.rule_id}: {cases} fixtures")

    if result.failures:
        print("\nExtraction errors:")
        for path, err in sorted(result.failures.items()):
            print(f"  ✗ {path}: {err}")
        return 1

    validation = validate_rules(result.rules, strict=args.strict)
    for warning in validation.warnings:
        print(f"  ⚠ {warning}", file=sys.stderr)
    if validation.errors:
        print("\nValidation errors:")
        for err in validation.errors:
            print(f"  ✗ {err}")
        return 1

    print(f"\nCoverage: {compute_coverage(result.rules):.0%} of rules have fixtures")

    if args.json or args.markdown:
        print("\nGenerated:")
    if args.json:
        args.json.write_text(generate_fixtures_json(result.rules), encoding="utf-8")
        print(f"  {args.json}")
    if args.markdown:
        args.markdown.write_text(generate_rules_markdown(result.rules), encoding="utf-8")
        print(f"  {args.markdown}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
