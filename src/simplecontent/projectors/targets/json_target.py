"""JSONTarget -- serialize projected nodes to a JSON string."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simplecontent.core.models import ProjectedNode
from simplecontent.projectors.targets._serialize import to_json


@dataclass
class JSONTarget:
    """Serialize projected nodes to JSON.

    A single node becomes a JSON object, a sequence becomes a JSON array.
    Implements the ProjectionTarget[str] protocol.
    """

    indent: int | None = 2

    def serialize(self, nodes: ProjectedNode | Sequence[ProjectedNode | None]) -> str:
        """Serialize nodes to JSON string."""
        return to_json(nodes, indent=self.indent)
