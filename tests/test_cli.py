"""Tests for the command line entry point."""

import json

from rulefixtures.cli import main


def test_writes_outputs(packages, make_rule, tmp_path, capsys):
    make_rule(
        "no-empty",
        fileoverview="Warn for empty sections.",
        examples=[
            ({"name": "ok"}, "# title"),
            ({"name": "bad", "label": "input"}, "#"),
            ({"name": "bad", "label": "output"}, "1:1: Unexpected empty heading"),
        ],
    )
    json_out = tmp_path / "fixtures.json"
    md_out = tmp_path / "rules.md"

    code = main([str(packages), "--json", str(json_out), "--markdown", str(md_out)])

    assert code == 0
    document = json.loads(json_out.read_text())
    assert document["no-empty"]["tests"]["true"]["bad"]["output"] == [
        "1:1: Unexpected empty heading"
    ]
    assert "`no-empty`" in md_out.read_text()
    assert "✓ no-empty: 2 fixtures" in capsys.readouterr().out


def test_extraction_failure_exits_nonzero(packages, make_rule, capsys):
    make_rule("no-empty", module="other")

    assert main([str(packages)]) == 1
    assert "invalid `@module`" in capsys.readouterr().out


def test_strict_fails_without_examples(packages, make_rule):
    make_rule("no-empty")

    assert main([str(packages)]) == 0
    assert main([str(packages), "--strict"]) == 1


def test_prefix_from_environment(packages, monkeypatch, capsys):
    rule_dir = packages / "lint-no-foo"
    rule_dir.mkdir()
    (rule_dir / "index.js").write_text(
        '/**\n * @module no-foo\n * @fileoverview No foo.\n * @example {}\n *   foo\n */\n'
    )
    monkeypatch.setenv("RULEFIXTURES_PREFIX", "lint-")

    assert main([str(packages)]) == 0
    assert "✓ no-foo: 1 fixtures" in capsys.readouterr().out


def test_missing_directory(tmp_path):
    assert main([str(tmp_path / "nope")]) == 1


def test_unknown_log_level_still_runs(packages, make_rule, monkeypatch):
    make_rule("no-empty", examples=[({"name": "ok"}, "# title")])
    monkeypatch.setenv("RULEFIXTURES_LOG_LEVEL", "chatty")

    assert main([str(packages)]) == 0
