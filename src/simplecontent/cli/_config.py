"""CLI configuration via environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field


def _int_env(var: str, default: int) -> int:
    """Parse an integer from an environment variable with a helpful error on bad input."""
    raw = os.environ.get(var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as err:
        print(f"Error: {var}={raw!r} is not a valid integer", file=sys.stderr)
        raise SystemExit(1) from err


@dataclass
class SimpleContentConfig:
    """Configuration for the simplecontent CLI.

    Reads from environment variables with SIMPLECONTENT_ prefix.
    """

    output_format: str = field(
        default_factory=lambda: os.environ.get("SIMPLECONTENT_OUTPUT_FORMAT", "json")
    )
    json_indent: int = field(default_factory=lambda: _int_env("SIMPLECONTENT_JSON_INDENT", 2))

    def target_kwargs(self, fmt: str) -> dict[str, int]:
        """Constructor kwargs for the named projection target."""
        if fmt == "json":
            return {"indent": self.json_indent}
        return {}


def get_config() -> SimpleContentConfig:
    """Get the current configuration."""
    return SimpleContentConfig()
