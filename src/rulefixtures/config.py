"""Settings for locating rules, read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_PREFIX = "remark-lint-"
DEFAULT_ENTRY_MODULE = "index.js"
DEFAULT_LOG_LEVEL = "INFO"


def _log_level(value: str) -> str:
    """Upper-case a level name, falling back to INFO for unknown names."""
    level = value.strip().upper()
    # getLevelName maps known names to ints and anything else to "Level X"
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class ExtractorConfig:
    """Where rules live and how they are named."""

    prefix: str = DEFAULT_PREFIX  # Stripped from the directory name
    entry_module: str = DEFAULT_ENTRY_MODULE  # File holding the doc comment
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> ExtractorConfig:
        return cls(
            prefix=os.environ.get("RULEFIXTURES_PREFIX", DEFAULT_PREFIX),
            entry_module=os.environ.get(
                "RULEFIXTURES_ENTRY_MODULE", DEFAULT_ENTRY_MODULE
            ),
            log_level=_log_level(
                os.environ.get("RULEFIXTURES_LOG_LEVEL", DEFAULT_LOG_LEVEL)
            ),
        )
