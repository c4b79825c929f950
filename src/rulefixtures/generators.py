"""Output generators for extracted fixtures."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from .models import RuleRecord


def _record_to_dict(record: RuleRecord) -> dict[str, Any]:
    return {
        "ruleId": record.rule_id,
        "description": record.description,
        "filePath": record.file_path,
        "tests": {
            setting: {name: asdict(case) for name, case in context.items()}
            for setting, context in record.tests.items()
        },
    }


def generate_fixtures_json(records: list[RuleRecord]) -> str:
    """Serialize rules to a JSON document keyed by rule id."""
    document = {r.rule_id: _record_to_dict(r) for r in records}
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def generate_rules_markdown(records: list[RuleRecord]) -> str:
    """Generate the rule list with descriptions and fixture counts."""
    lines = [
        "<!-- AUTO-GENERATED. DO NOT EDIT. Run `rulefixtures --markdown` to regenerate. -->",
        "",
        "# Rules",
        "",
    ]

    if not records:
        lines.append("*No rules found.*")
        lines.append("")
        return "\n".join(lines)

    lines.extend(
        [
            "| Rule | Description | Fixtures |",
            "|------|-------------|----------|",
        ]
    )

    for r in sorted(records, key=lambda x: x.rule_id):
        # Only the first paragraph fits in a table cell
        brief = r.description.split("\n\n")[0].replace("\n", " ")
        desc = brief.replace("|", "\\|")
        count = sum(len(context) for context in r.tests.values())
        lines.append(f"| [`{r.rule_id}`]({r.file_path}) | {desc} | {count} |")

    lines.append("")
    return "\n".join(lines)
