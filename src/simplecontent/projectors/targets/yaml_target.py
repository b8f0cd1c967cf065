"""YAMLTarget -- serialize projected nodes to a YAML string."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simplecontent.core.models import ProjectedNode
from simplecontent.projectors.targets._serialize import to_yaml


@dataclass
class YAMLTarget:
    """Serialize projected nodes to YAML, same key layout as JSONTarget.

    Implements the ProjectionTarget[str] protocol.
    """

    def serialize(self, nodes: ProjectedNode | Sequence[ProjectedNode | None]) -> str:
        """Serialize nodes to YAML string."""
        return to_yaml(nodes)
