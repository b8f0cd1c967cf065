"""Core data models for content projection.

These models define the contract between components:
- Content sources expose nodes satisfying SourceNode
- Summarizers produce ContentTypeSummary / TemplateSummary
- TreeProjector reads SourceNodes and produces ProjectedNodes
- Targets serialize ProjectedNodes to text
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable


# =============================================================================
# Source side (Contract: content system → projector)
# =============================================================================
# The projector only reads these. Lifecycle and ownership belong to the
# content system that hands them over.


@runtime_checkable
class SourcePropertyLike(Protocol):
    """A single (alias, value) pair on a content node."""

    alias: str
    value: Any


@runtime_checkable
class SourceNode(Protocol):
    """A node in a published-content tree.

    Precondition: the tree reachable through ``children`` is acyclic.
    """

    id: int
    name: str
    url: str
    level: int
    document_type_id: int | None
    template_id: int | None

    @property
    def properties(self) -> Sequence[SourcePropertyLike]: ...

    @property
    def children(self) -> Sequence[SourceNode]: ...


# =============================================================================
# Summaries (Contract: registries → projector)
# =============================================================================


@dataclass(frozen=True)
class ContentTypeSummary:
    """Minimal descriptor of a document type.

    ``parent`` is only populated when the summarizer was asked to recurse,
    in which case it holds the whole ancestor chain.
    """

    id: int
    alias: str
    name: str
    parent: ContentTypeSummary | None = None


@dataclass(frozen=True)
class TemplateSummary:
    """Minimal descriptor of a rendering template (master chain in ``parent``)."""

    id: int
    alias: str
    name: str
    parent: TemplateSummary | None = None


# =============================================================================
# Projected side (Contract: projector → targets)
# =============================================================================


@dataclass(frozen=True)
class ProjectedNode:
    """Bare-minimum data for a page, ready for serialization.

    ``children`` is None when child recursion was not requested; an empty
    tuple means recursion was requested and the node is a leaf.
    ``child_ids`` is always populated.

    ``properties`` is a read-only view over a private copy of the mapping
    passed in. Property values may be lists or dicts, so nodes compare by
    value but are not hashable.
    """

    id: int
    name: str
    url: str
    level: int
    child_ids: tuple[int, ...] = ()
    children: tuple[ProjectedNode, ...] | None = None
    content_type: ContentTypeSummary | None = None
    template: TemplateSummary | None = None
    properties: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def walk(self):
        """Yield self, then every projected descendant depth-first."""
        yield self
        for child in self.children or ():
            yield from child.walk()

    @property
    def size(self) -> int:
        """Number of projected nodes in this subtree, self included."""
        return sum(1 for _ in self.walk())
