"""Projection options: YAML config + env var overrides.

Priority: env var > YAML file > default.
Env vars use SIMPLECONTENT_{OPTION_NAME} convention
(e.g. SIMPLECONTENT_RECURSE_CHILDREN=off).
YAML file default: ~/.simplecontent/options.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

_TRUTHY = {"1", "true", "on", "yes"}
_FALSY = {"0", "false", "off", "no"}
_DEFAULT_PATH = Path("~/.simplecontent/options.yaml").expanduser()
_ENV_PREFIX = "SIMPLECONTENT_"


def _parse_bool(raw: Any) -> bool | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        val = raw.strip().lower()
        if val in _TRUTHY:
            return True
        if val in _FALSY:
            return False
    return None


def _parse_depth(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            return int(raw)
        except ValueError as err:
            raise ValueError(f"max_depth must be an integer, got {raw!r}") from err
    return None


@dataclass(frozen=True)
class ProjectionOptions:
    """Immutable options record passed unchanged through recursive projection."""

    # Populate ProjectedNode.children by projecting every immediate child
    recurse_children: bool = True
    # Forwarded to the content-type summarizer (expand parent content types)
    recurse_content_types: bool = True
    # Forwarded to the template summarizer (expand master templates)
    recurse_templates: bool = True
    # Stop populating children below this many levels under the root.
    # None follows the content tree all the way down.
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def load(cls, path: Path | None = None) -> ProjectionOptions:
        """Load options from YAML file, then override with env vars."""
        file_path = path or _DEFAULT_PATH
        file_values: dict[str, Any] = {}

        if file_path.exists():
            raw = yaml.safe_load(file_path.read_text()) or {}
            if isinstance(raw, dict):
                for k, v in raw.items():
                    if k == "max_depth":
                        file_values[k] = _parse_depth(v)
                        continue
                    parsed = _parse_bool(v)
                    if parsed is not None:
                        file_values[k] = parsed

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            name = f.name
            env_key = f"{_ENV_PREFIX}{name.upper()}"

            if env_key in os.environ:
                if name == "max_depth":
                    kwargs[name] = _parse_depth(os.environ[env_key])
                    continue
                parsed = _parse_bool(os.environ[env_key])
                # Non-boolean values are ignored
                if parsed is not None:
                    kwargs[name] = parsed
            elif name in file_values:
                kwargs[name] = file_values[name]

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> ProjectionOptions:
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
