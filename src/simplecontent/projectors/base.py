"""Projection protocols: the collaborators of the tree projector.

ContentTypeSummarizer: resolves a document type id to a summary
TemplateSummarizer: resolves a template id to a summary
ProjectionTarget: serializes projected nodes to a target format
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from simplecontent.core.models import ContentTypeSummary, ProjectedNode, TemplateSummary

T = TypeVar("T")


@runtime_checkable
class ContentTypeSummarizer(Protocol):
    """Looks up content types by id."""

    def summarize(
        self, content_type_id: int | None, recurse: bool = True
    ) -> ContentTypeSummary | None:
        """Summarize a content type, expanding its ancestors when ``recurse``."""
        ...


@runtime_checkable
class TemplateSummarizer(Protocol):
    """Looks up templates by id."""

    def summarize(
        self, template_id: int | None, recurse: bool = True
    ) -> TemplateSummary | None:
        """Summarize a template, expanding its masters when ``recurse``."""
        ...


@runtime_checkable
class ProjectionTarget(Protocol[T]):
    """Serializes projected nodes to a target format."""

    def serialize(self, nodes: ProjectedNode | Sequence[ProjectedNode | None]) -> T:
        """Serialize a single node or a sequence of nodes."""
        ...
