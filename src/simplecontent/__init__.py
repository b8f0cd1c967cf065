"""simplecontent: project CMS content trees into minimal, JSON-ready nodes.

    from simplecontent import ProjectionOptions, TreeProjector, to_json

    projector = TreeProjector(content_types=types, templates=templates)
    print(to_json(projector.project(root, ProjectionOptions(recurse_children=False))))
"""

from simplecontent.core.models import (
    ContentTypeSummary,
    ProjectedNode,
    SourceNode,
    TemplateSummary,
)
from simplecontent.projectors import ProjectionOptions, TreeProjector
from simplecontent.projectors.targets import to_json, to_object, to_yaml

__version__ = "0.1.0"

__all__ = [
    "ContentTypeSummary",
    "ProjectedNode",
    "ProjectionOptions",
    "SourceNode",
    "TemplateSummary",
    "TreeProjector",
    "to_json",
    "to_object",
    "to_yaml",
]
