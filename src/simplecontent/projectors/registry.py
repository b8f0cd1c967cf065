"""Target registry -- register and retrieve projection targets by name."""

from __future__ import annotations

from typing import Any

from simplecontent.projectors.base import ProjectionTarget
from simplecontent.projectors.targets import JSONTarget, YAMLTarget

_targets: dict[str, type] = {}


def reset() -> None:
    """Restore the built-in targets. Use in test fixtures for isolation."""
    _targets.clear()
    register_target("json", JSONTarget)
    register_target("yaml", YAMLTarget)


def register_target(name: str, cls: type) -> None:
    _targets[name] = cls


def get_target(name: str, **kwargs: Any) -> ProjectionTarget:
    if name not in _targets:
        raise KeyError(f"Unknown projection target: {name!r}. Available: {list(_targets)}")
    return _targets[name](**kwargs)


def available_targets() -> list[str]:
    return list(_targets)


reset()
