"""Tests for tag lookups."""

from rulefixtures.models import Tag
from rulefixtures.tags import find_all, find_first

TAGS = [
    Tag("module", "no-empty"),
    Tag("example", "first"),
    Tag("fileoverview", "Check."),
    Tag("example", "second"),
]


def test_find_first():
    assert find_first(TAGS, "module") == "no-empty"


def test_find_first_prefers_earliest():
    assert find_first(TAGS, "example") == "first"


def test_find_first_missing():
    assert find_first(TAGS, "returns") is None
    assert find_first([], "module") is None


def test_find_first_skips_holes():
    assert find_first([None, Tag("module", "x")], "module") == "x"


def test_find_all_keeps_order():
    assert find_all(TAGS, "example") == ["first", "second"]


def test_find_all_missing():
    assert find_all(TAGS, "param") == []


def test_find_first_short_circuits():
    seen = []

    def tags():
        for tag in TAGS:
            seen.append(tag.type)
            yield tag

    assert find_first(tags(), "module") == "no-empty"
    assert seen == ["module"]
