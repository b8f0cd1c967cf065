"""In-memory content nodes satisfying the SourceNode protocol."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

DEFAULT_URL = "/"


@dataclass(frozen=True)
class SourceProperty:
    """A (alias, value) pair on a content node. The value keeps its type."""

    alias: str
    value: Any = None


@dataclass
class ContentNode:
    """A published-content node held in memory."""

    id: int
    name: str
    url: str = DEFAULT_URL
    level: int = 0
    document_type_id: int | None = None
    template_id: int | None = None
    properties: list[SourceProperty] = field(default_factory=list)
    children: list[ContentNode] = field(default_factory=list)

    def add_child(self, child: ContentNode) -> ContentNode:
        """Add a child node and return it for chaining."""
        self.children.append(child)
        return child

    def get_property(self, alias: str) -> Any:
        """Value of the last property with this alias, or None."""
        for prop in reversed(self.properties):
            if prop.alias == alias:
                return prop.value
        return None

    def depth_first(self) -> Iterator[ContentNode]:
        """Traverse tree depth-first, yielding self then children."""
        yield self
        for child in self.children:
            yield from child.depth_first()


def find_by_id(root: ContentNode, node_id: int) -> ContentNode | None:
    """Find a node in the tree by id."""
    for node in root.depth_first():
        if node.id == node_id:
            return node
    return None
