"""Pytest fixtures for rulefixtures tests."""

import pytest

from tests.helpers import doc_comment, write_rule


@pytest.fixture
def packages(tmp_path):
    """Empty packages directory."""
    path = tmp_path / "packages"
    path.mkdir()
    return path


@pytest.fixture
def make_rule(packages):
    """
    Factory that writes a rule package and returns its directory.

    Usage:
        rule_dir = make_rule("no-empty", fileoverview="...", examples=[...])
    """

    def _make(rule_id, module=None, fileoverview="Check things.", examples=None):
        source = doc_comment(
            module=rule_id if module is None else module,
            fileoverview=fileoverview,
            examples=examples,
        )
        return write_rule(packages, rule_id, source)

    return _make
