"""Projectors -- turn content trees into serialization-friendly nodes.

Core abstractions:
- ContentTypeSummarizer / TemplateSummarizer: external lookups
- TreeProjector: mirrors a content tree into ProjectedNodes
- ProjectionTarget: serializes ProjectedNodes to a target format
"""

from simplecontent.projectors.base import (
    ContentTypeSummarizer,
    ProjectionTarget,
    TemplateSummarizer,
)
from simplecontent.projectors.options import ProjectionOptions
from simplecontent.projectors.tree import TreeProjector, project_properties

__all__ = [
    "ContentTypeSummarizer",
    "ProjectionOptions",
    "ProjectionTarget",
    "TemplateSummarizer",
    "TreeProjector",
    "project_properties",
]
