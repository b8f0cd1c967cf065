"""Tree projector: content node -> ProjectedNode, recursing per options."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from simplecontent.core.models import (
    ContentTypeSummary,
    ProjectedNode,
    SourceNode,
    TemplateSummary,
)
from simplecontent.observability import get_logger
from simplecontent.projectors.base import ContentTypeSummarizer, TemplateSummarizer
from simplecontent.projectors.options import ProjectionOptions

logger = get_logger(__name__)

_DEFAULT_OPTIONS = ProjectionOptions()


def _is_blank(value: Any) -> bool:
    """True when the value's string form is missing, empty or whitespace."""
    if value is None:
        return True
    return not str(value).strip()


def project_properties(node: SourceNode) -> dict[str, Any]:
    """Collect non-blank properties keyed by alias.

    Values keep their original type so serializers emit native JSON
    numbers, booleans, arrays and objects. Each value is a deep copy, so
    nothing reachable from the result is shared with the source node.
    """
    return {
        prop.alias: copy.deepcopy(prop.value)
        for prop in node.properties
        if not _is_blank(prop.value)
    }


@dataclass
class TreeProjector:
    """Project a content tree into a mirrored tree of ProjectedNodes.

    Usage:
        projector = TreeProjector(
            content_types=ContentTypeRegistry(...),  # or None
            templates=TemplateRegistry(...),          # or None
        )
        root = projector.project(node, ProjectionOptions(recurse_children=False))

    The summarizers are called for every projected node with the matching
    recurse flag forwarded; when one is not configured the corresponding
    field stays None. Errors raised by a summarizer or by the source node
    propagate unchanged.
    """

    content_types: ContentTypeSummarizer | None = None
    templates: TemplateSummarizer | None = None

    def project(
        self,
        node: SourceNode | None,
        options: ProjectionOptions | None = None,
    ) -> ProjectedNode | None:
        """Project a single node (and, per options, its descendants).

        Returns None when ``node`` is None.
        """
        if node is None:
            return None
        opts = options or _DEFAULT_OPTIONS
        result = self._project(node, opts, 0)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "projection.completed",
                node_id=result.id,
                node_count=result.size,
                **opts.to_dict(),
            )
        return result

    def project_all(
        self,
        nodes: Iterable[SourceNode | None],
        options: ProjectionOptions | None = None,
    ) -> list[ProjectedNode | None]:
        """Project each node in order. None entries map to None."""
        return [self.project(n, options) for n in nodes]

    def _project(self, node: SourceNode, opts: ProjectionOptions, depth: int) -> ProjectedNode:
        source_children = list(node.children)

        children: tuple[ProjectedNode, ...] | None = None
        if opts.recurse_children and (opts.max_depth is None or depth < opts.max_depth):
            children = tuple(self._project(child, opts, depth + 1) for child in source_children)

        return ProjectedNode(
            id=node.id,
            name=node.name,
            url=node.url,
            level=node.level,
            child_ids=tuple(child.id for child in source_children),
            children=children,
            content_type=self._summarize_content_type(node, opts),
            template=self._summarize_template(node, opts),
            properties=project_properties(node),
        )

    def _summarize_content_type(
        self, node: SourceNode, opts: ProjectionOptions
    ) -> ContentTypeSummary | None:
        if self.content_types is None:
            return None
        return self.content_types.summarize(node.document_type_id, opts.recurse_content_types)

    def _summarize_template(
        self, node: SourceNode, opts: ProjectionOptions
    ) -> TemplateSummary | None:
        if self.templates is None:
            return None
        return self.templates.summarize(node.template_id, opts.recurse_templates)
