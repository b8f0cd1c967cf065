"""Logging settings, read from the environment.

    SIMPLECONTENT_LOG_LEVEL    DEBUG | INFO (default) | WARNING | ERROR
    SIMPLECONTENT_LOG_FORMAT   json (default) | console
    SIMPLECONTENT_LOG_PATH     append JSON lines to this file instead of stderr
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOG_FORMATS = ("json", "console")


def _env(name: str, default: str | None = None) -> str | None:
    return os.environ.get(f"SIMPLECONTENT_LOG_{name}", default)


@dataclass
class ObservabilityConfig:
    """Where simplecontent logs go and how they are rendered."""

    log_level: str = field(default_factory=lambda: _env("LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: _env("FORMAT", "json"))
    log_path: str | None = field(default_factory=lambda: _env("PATH"))

    def level_number(self) -> int:
        """Numeric stdlib level. Raises ValueError for an unknown level name."""
        number = logging.getLevelNamesMapping().get(self.log_level.upper())
        if number is None:
            raise ValueError(
                f"Unknown log level {self.log_level!r}. Use DEBUG, INFO, WARNING or ERROR."
            )
        return number
