"""Lookups over the ordered tags of a doc comment."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Tag


def find_first(tags: Iterable[Tag], key: str) -> str | None:
    """Return the string of the first tag with type `key`, or None."""
    for tag in tags:
        if tag is not None and tag.type == key:
            return tag.string
    return None


def find_all(tags: Iterable[Tag], key: str) -> list[str]:
    """Return the strings of every tag with type `key`, in source order."""
    return [tag.string for tag in tags if tag is not None and tag.type == key]
